import os
from . import config as config_module
from .cli_logger import logger
from .context import ProjectKind
from .errors import ElementExistsError, ProjectExistsError, UnknownTemplateError
from .utils import register_source

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
TEMPLATE_SUFFIX = ".template"
CLASS_TEMPLATES = "ClassTemplates"
CLASS_NAME_PLACEHOLDER = "Template"
CMAKELISTS_FILE = "CMakeLists.txt"
CMAKE_MINIMUM_VERSION = "3.24"
INITIAL_PROJECT_VERSION = "0.0.1"

# element type -> (header template, source template, name suffix)
ELEMENT_TEMPLATES = {
    "class": ("Class.h", "Class.cpp", ""),
    "component": ("Component.h", "Component.cpp", "Component"),
}


def list_templates():
    return ProjectKind.template_names()


def _read_template(*parts):
    with open(os.path.join(TEMPLATES_DIR, *parts) + TEMPLATE_SUFFIX, "r", encoding="utf-8") as f:
        return f.read()


def _template_files(kind):
    template_dir = os.path.join(TEMPLATES_DIR, kind.value)
    return sorted(
        f[:-len(TEMPLATE_SUFFIX)] for f in os.listdir(template_dir) if f.endswith(TEMPLATE_SUFFIX)
    )


def _write_file(path, contents):
    with open(path, "w", encoding="utf-8") as f:
        f.write(contents)
    logger.step_info(f"Created file: {path}", indent=2)


def render_root_cmakelists(metadata):
    return (
        f"cmake_minimum_required(VERSION {CMAKE_MINIMUM_VERSION})\n"
        f"project({metadata.name} VERSION {INITIAL_PROJECT_VERSION})\n"
        "add_subdirectory(modules/JUCE)\n"
        "add_subdirectory(src)\n"
    )


def create_project(metadata):
    """Lay out a new project directory for ``metadata`` (without version control)."""
    if metadata.kind is ProjectKind.UNKNOWN:
        raise UnknownTemplateError(
            f"Unknown template. Available templates: {', '.join(list_templates())}"
        )
    if os.path.exists(metadata.root_path):
        raise ProjectExistsError(f"Project directory already exists: {metadata.root_path}")

    logger.info(f"Creating project '{metadata.name}' at {metadata.root_path}...")
    os.makedirs(metadata.source_dir)

    _write_file(os.path.join(metadata.root_path, CMAKELISTS_FILE), render_root_cmakelists(metadata))
    for file_name in _template_files(metadata.kind):
        _write_file(
            os.path.join(metadata.source_dir, file_name),
            _read_template(metadata.kind.value, file_name),
        )

    config_module.save_config(config_module.default_config(metadata), path=metadata.root_path)
    return metadata.root_path


def add_element(metadata, element_type, element_name, header_only=False):
    """Create a class or component in ``src/`` and register its source file.

    Returns the list of files created.
    """
    if element_type not in ELEMENT_TEMPLATES:
        raise UnknownTemplateError(f"Invalid element type: {element_type}")
    header_template, source_template, suffix = ELEMENT_TEMPLATES[element_type]
    class_name = f"{element_name}{suffix}"

    header_path = os.path.join(metadata.source_dir, f"{class_name}.h")
    source_path = os.path.join(metadata.source_dir, f"{class_name}.cpp")
    if os.path.exists(header_path) or os.path.exists(source_path):
        raise ElementExistsError(f"{element_type} '{class_name}' already exists in the project.")

    os.makedirs(metadata.source_dir, exist_ok=True)
    created = [header_path]
    _write_file(header_path, _read_template(CLASS_TEMPLATES, header_template).replace(CLASS_NAME_PLACEHOLDER, class_name))
    if not header_only:
        _write_file(source_path, _read_template(CLASS_TEMPLATES, source_template).replace(CLASS_NAME_PLACEHOLDER, class_name))
        created.append(source_path)
        register_source(os.path.join(metadata.source_dir, CMAKELISTS_FILE), f"{class_name}.cpp")

    logger.success(f"{element_type} '{class_name}' added successfully!")
    return created
