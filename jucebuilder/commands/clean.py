import click
import os
import shutil
from .. import config as config_module
from ..builder import COMPILE_COMMANDS_FILE
from ..cli_logger import logger
from ..decorators import handle_exceptions


@click.command()
@click.pass_context
@handle_exceptions
def clean(ctx):
    """Remove the build directory and generated compile_commands.json."""
    metadata = config_module.load_project_metadata(ctx.obj["path"])
    logger.info("Cleaning build artifacts...")

    items_removed = 0
    if os.path.isdir(metadata.build_dir):
        logger.info(f"Attempting to remove directory {metadata.build_dir}...")
        shutil.rmtree(metadata.build_dir)
        logger.success(f"Removed directory {metadata.build_dir}")
        items_removed += 1

    compile_commands = os.path.join(metadata.root_path, COMPILE_COMMANDS_FILE)
    if os.path.isfile(compile_commands):
        os.remove(compile_commands)
        logger.success(f"Removed file {compile_commands}")
        items_removed += 1

    if items_removed > 0:
        logger.success(f"Cleaning complete. Removed {items_removed} items.")
    else:
        logger.info("Project is already clean.")
