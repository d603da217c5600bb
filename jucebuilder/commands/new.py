import click
import os
from .. import scaffold
from .. import vcs
from ..cli_logger import logger
from ..context import DEFAULT_BUILD_CONFIGURATION, ProjectKind, ProjectMetadata
from ..decorators import handle_exceptions


@click.command()
@click.argument("project_name")
@click.option("--template", "-t", type=click.Choice(ProjectKind.template_names()), default=None,
              help="Project template to use.")
@click.option("--no-git", is_flag=True, help="Do not initialize a git repository.")
@click.option("--no-juce", is_flag=True, help="Do not add JUCE as a git submodule.")
@click.pass_context
@handle_exceptions
def new(ctx, project_name, template, no_git, no_juce):
    """Create a new JUCE project.

    PROJECT_NAME: Name of the project directory to create under --path.
    """
    if template is None:
        template = click.prompt(
            "Template",
            type=click.Choice(ProjectKind.template_names()),
            default=ProjectKind.GUI_APPLICATION.value,
        )

    metadata = ProjectMetadata(
        name=project_name,
        root_path=os.path.join(ctx.obj["path"], project_name),
        kind=ProjectKind.parse(template),
        build_configuration=DEFAULT_BUILD_CONFIGURATION,
    )
    scaffold.create_project(metadata)
    if not no_git:
        vcs.initialize_repository(metadata.root_path, with_juce=not no_juce)

    logger.success(f"Project '{project_name}' created successfully!")
    logger.info(f"Next steps: cd {metadata.root_path} && jucebuilder run")
