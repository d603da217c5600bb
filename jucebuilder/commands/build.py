import click
from .. import builder
from .. import config as config_module
from ..context import BUILD_CONFIGURATIONS
from ..decorators import handle_exceptions


@click.command()
@click.option("--build-type", "-b", type=click.Choice(BUILD_CONFIGURATIONS), default=None,
              help="Build configuration. Defaults to the last one used.")
@click.pass_context
@handle_exceptions
def build(ctx, build_type):
    """Configure and build the project with CMake."""
    metadata = config_module.load_project_metadata(ctx.obj["path"], build_type=build_type)
    config_module.remember_build_type(metadata.root_path, metadata.build_configuration)
    builder.build_project(metadata)
