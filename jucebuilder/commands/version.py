import click
import importlib.metadata
from ..cli_logger import logger


@click.command()
def version():
    """Print the version of the jucebuilder tool."""
    try:
        ver = importlib.metadata.version("jucebuilder")
        logger.info(f"jucebuilder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of jucebuilder. Is it installed correctly?")
