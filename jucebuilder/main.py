import sys
import click
from .cli_logger import logger
from .commands.new import new
from .commands.add import add
from .commands.build import build
from .commands.run import run
from .commands.clean import clean
from .commands.config import config
from .commands.list_templates import list_templates
from .commands.log import log
from .commands.version import version


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """jucebuilder: scaffold, build and run JUCE projects with CMake."""
    ctx.obj = {"path": path}

cli.add_command(new)
cli.add_command(add)
cli.add_command(build)
cli.add_command(run)
cli.add_command(clean)
cli.add_command(config)
cli.add_command(list_templates)
cli.add_command(log)
cli.add_command(version)


def main():
    try:
        cli()
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.info("Please report this issue to the jucebuilder developers.")
        logger.exception(*sys.exc_info())
        sys.exit(1)


if __name__ == '__main__':
    main()
