import click
import json
import os
from .. import config as config_module
from ..cli_logger import logger
from ..context import BUILD_CONFIGURATIONS, ProjectKind


# Keys whose values are validated before being written.
_VALIDATED_KEYS = {
    "build.type": BUILD_CONFIGURATIONS,
    "project.template": tuple(ProjectKind.template_names()),
}


def _load_or_report(ctx):
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found. Please run 'jucebuilder new' first.")
    return conf


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the jucebuilder.toml project file."""
    pass


@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the jucebuilder.toml file."""
    if not _load_or_report(ctx):
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, "r", encoding="utf-8") as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_module.CONFIG_FILE} at {config_file_path}: {e}")
        logger.info("Please check file permissions.")


@config.command(name="list")
@click.pass_context
def list_values(ctx):
    """List all configuration keys and values."""
    conf = _load_or_report(ctx)
    if conf:
        click.echo(json.dumps(conf, indent=4))


@config.command()
@click.argument("key")
@click.pass_context
def get(ctx, key):
    """Get a value from the jucebuilder.toml file."""
    conf = _load_or_report(ctx)
    if not conf:
        return

    value = conf
    try:
        for k in key.split("."):
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the jucebuilder.toml file."""
    conf = _load_or_report(ctx)
    if not conf:
        return

    allowed = _VALIDATED_KEYS.get(key)
    if allowed is not None and value not in allowed:
        logger.error(f"Error: Invalid value '{value}' for '{key}'. Expected one of: {', '.join(allowed)}.")
        return

    keys = key.split(".")
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")
