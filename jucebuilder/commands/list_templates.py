import click
from .. import scaffold
from ..cli_logger import logger


@click.command(name="list-templates")
def list_templates():
    """List available project templates."""
    logger.info("Available templates:")
    for name in scaffold.list_templates():
        logger.step_info(name, indent=2)
