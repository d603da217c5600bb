import shlex
import subprocess
from ..cli_logger import logger


def format_command(command):
    return " ".join(shlex.quote(str(part)) for part in command)


def run_shell_command(command, stream_output=False, env=None, cwd=None):
    """
    Executes an external command such as ``cmake`` or ``git``.

    Args:
        command (list): The command to execute as a list of strings.
        stream_output (bool): If True, forwards each output line to the logger
            while the command runs.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (stdout, stderr, return_code). When streaming, stdout holds the
        combined output and stderr is empty. A missing executable yields
        return code -1 with the error text in stderr.
    """
    logger.step_info(f"+ {format_command(command)}")
    try:
        if stream_output:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                bufsize=1,
                universal_newlines=True,
                env=env,
                cwd=cwd
            )
            output = []
            for line in process.stdout:
                output.append(line)
                logger.step_info(line.rstrip(), indent=2)
            process.wait()
            return "".join(output), "", process.returncode

        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            check=False,
            cwd=cwd
        )
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return "", str(e), -1
