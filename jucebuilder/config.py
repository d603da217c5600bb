import os
import toml
from .cli_logger import logger
from .context import DEFAULT_BUILD_CONFIGURATION, ProjectKind, ProjectMetadata
from .errors import ConfigVersionError

CONFIG_FILE = "jucebuilder.toml"
CONFIG_VERSION = 1


def config_path(path="."):
    return os.path.join(path, CONFIG_FILE)


def load_config(path="."):
    """Return the project side file as a dict, or ``{}`` if it cannot be read."""
    path_to_config = config_path(path)
    if os.path.exists(path_to_config):
        try:
            with open(path_to_config, "r", encoding="utf-8") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {path_to_config}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {path_to_config}: {e}")
            logger.info("Please check file permissions.")
    return {}


def save_config(config, path="."):
    path_to_config = config_path(path)
    try:
        with open(path_to_config, "w", encoding="utf-8") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {path_to_config}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False


def default_config(metadata):
    return {
        "config_version": CONFIG_VERSION,
        "project": {
            "name": metadata.name,
            "template": metadata.kind.value,
        },
        "build": {
            "type": metadata.build_configuration,
        },
    }


def load_project_metadata(path=".", build_type=None):
    """Build :class:`ProjectMetadata` for the project rooted at ``path``.

    The side file supplies name, template and last used build type; the
    directory name stands in for a missing project name. ``build_type``
    overrides the stored configuration.
    """
    root = os.path.abspath(path)
    conf = load_config(root)
    version = conf.get("config_version", CONFIG_VERSION)
    if not isinstance(version, int) or version > CONFIG_VERSION:
        raise ConfigVersionError(
            f"{CONFIG_FILE} has config_version {version!r}; this jucebuilder supports up to {CONFIG_VERSION}."
        )

    project = conf.get("project", {})
    name = project.get("name") or os.path.basename(root)
    kind = ProjectKind.parse(project.get("template"))
    if build_type is None:
        build_type = conf.get("build", {}).get("type", DEFAULT_BUILD_CONFIGURATION)
    return ProjectMetadata(name, root, kind, build_type)


def remember_build_type(path, build_type):
    """Persist ``build_type`` as the last used build configuration."""
    conf = load_config(path)
    conf.setdefault("config_version", CONFIG_VERSION)
    conf.setdefault("build", {})["type"] = build_type
    return save_config(conf, path)
