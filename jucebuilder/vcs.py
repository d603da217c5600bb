import os
from .cli_logger import logger
from .errors import VcsError
from .utils import run_shell_command

JUCE_REPOSITORY_URL = "https://github.com/juce-framework/JUCE.git"
JUCE_SUBMODULE_PATH = "modules/JUCE"
GITIGNORE_ENTRIES = ("modules/", "jucebuilder_build/", "build/", "compile_commands.json")
INITIAL_COMMIT_MESSAGE = "Initial commit"


def _git(root, *args, stream_output=False):
    stdout, stderr, returncode = run_shell_command(["git", *args], stream_output=stream_output, cwd=root)
    if returncode != 0:
        raise VcsError(f"git {args[0]} failed: {(stderr or stdout).strip()}")
    return stdout


def write_gitignore(root):
    path = os.path.join(root, ".gitignore")
    content = ""
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    existing = {line.strip() for line in content.splitlines()}
    missing = [entry for entry in GITIGNORE_ENTRIES if entry not in existing]
    with open(path, "a", encoding="utf-8") as f:
        if missing and content and not content.endswith("\n"):
            f.write("\n")
        for entry in missing:
            f.write(f"{entry}\n")
    return path


def add_juce_submodule(root):
    if os.path.exists(os.path.join(root, JUCE_SUBMODULE_PATH)):
        logger.info("JUCE already present, skipping clone.")
        return False
    logger.info("Cloning JUCE from GitHub... this may take some minutes. Please be patient!")
    _git(root, "submodule", "add", JUCE_REPOSITORY_URL, JUCE_SUBMODULE_PATH, stream_output=True)
    logger.success("JUCE added as a submodule.")
    return True


def initialize_repository(root, with_juce=True):
    """Create a git repository in ``root`` with an initial commit."""
    logger.info("Initializing Git repository...")
    _git(root, "init")
    write_gitignore(root)
    if with_juce:
        add_juce_submodule(root)
    _git(root, "add", "--all")
    _git(root, "commit", "-m", INITIAL_COMMIT_MESSAGE)
    logger.success("Git repository initialized with an initial commit.")
