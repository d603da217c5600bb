import contextlib
import datetime
import os
import sys
import traceback
from colorama import Fore, Style, init

init(autoreset=True)

LOG_DIR = os.environ.get(
    "JUCEBUILDER_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".jucebuilder", "logs"),
)
os.makedirs(LOG_DIR, exist_ok=True)

# Oldest session logs beyond this count are removed on startup.
MAX_LOG_FILES = 20

# level -> (color, console marker, goes to stderr)
LEVEL_STYLES = {
    "INFO": (Fore.CYAN, "", False),
    "STEP": (Fore.CYAN, "", False),
    "SUCCESS": (Fore.GREEN, "✓ ", False),
    "WARNING": (Fore.YELLOW, "⚠ ", True),
    "ERROR": (Fore.RED, "✖ ", True),
    "DEBUG": (Fore.WHITE + Style.DIM, "", False),
    "TRACEBACK": (Fore.RED, "", True),
}


def _session_log_name():
    return f"jucebuilder_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"


def _log_files():
    if not os.path.isdir(LOG_DIR):
        return []
    return [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]


def _created(path):
    # Another process may prune the same directory concurrently.
    try:
        return os.path.getctime(path)
    except FileNotFoundError:
        return 0.0


def prune_logs(keep=MAX_LOG_FILES):
    """Delete all but the ``keep`` most recent session logs."""
    for stale in sorted(_log_files(), key=_created)[:-keep or None]:
        with contextlib.suppress(FileNotFoundError):
            os.remove(stale)


class Logger:
    def __init__(self, log_file=None):
        self.log_file = log_file or os.path.join(LOG_DIR, _session_log_name())

    def _emit(self, level, message, indent=0, timestamped=True):
        color, marker, to_stderr = LEVEL_STYLES[level]
        # Resolved per call so redirected streams (tests, pipes) are honored.
        stream = sys.stderr if to_stderr else sys.stdout
        pad = " " * indent
        if marker:
            marker = f"{Style.BRIGHT}{marker}{Style.RESET_ALL}{color}"

        if timestamped:
            clock = datetime.datetime.now().strftime("%H:%M:%S")
            print(f"{color}{Style.BRIGHT}[{clock}]{Style.RESET_ALL} {color}{pad}{marker}{message}{Style.RESET_ALL}", file=stream)
            record = f"[{clock}] [{level}] {pad}{message}\n"
        else:
            print(f"{color}{pad}{marker}{message}{Style.RESET_ALL}", file=stream)
            record = f"[{level}] {pad}{message}\n"

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(record)

    def info(self, message):
        self._emit("INFO", message)

    def step_info(self, message, indent=0):
        self._emit("STEP", message, indent=indent, timestamped=False)

    def section(self, title):
        """Announce a build phase such as configure or compile."""
        self._emit("STEP", f"==> {title}", timestamped=False)

    def success(self, message):
        self._emit("SUCCESS", message)

    def warning(self, message):
        self._emit("WARNING", message)

    def error(self, message):
        self._emit("ERROR", message)

    def debug(self, message):
        self._emit("DEBUG", message)

    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        for chunk in traceback.format_exception(exc_type, exc_value, exc_traceback):
            for line in chunk.splitlines():
                if line.strip():
                    self._emit("TRACEBACK", f">> {line}")


prune_logs()
logger = Logger()


def get_latest_log_file():
    """Return the path to the latest log file."""
    log_files = _log_files()
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
