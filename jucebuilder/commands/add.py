import click
from .. import config as config_module
from .. import scaffold
from ..decorators import handle_exceptions


@click.command()
@click.argument("element_type", type=click.Choice(sorted(scaffold.ELEMENT_TEMPLATES)))
@click.argument("element_name")
@click.option("--header-only", is_flag=True, help="Create only a header file.")
@click.pass_context
@handle_exceptions
def add(ctx, element_type, element_name, header_only):
    """Add a class or component to the project and register it with CMake."""
    metadata = config_module.load_project_metadata(ctx.obj["path"])
    scaffold.add_element(metadata, element_type, element_name, header_only=header_only)
