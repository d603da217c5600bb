import functools
import sys
import click
from .cli_logger import logger
from .errors import JucebuilderError


def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands.

    Errors are logged and turned into a non-zero exit status.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("Command aborted by user.")
            sys.exit(1)
        except click.ClickException:
            raise
        except JucebuilderError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"An unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
