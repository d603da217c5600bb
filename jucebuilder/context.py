import enum
import os
from dataclasses import dataclass

from .errors import InvalidConfigurationError

BUILD_CONFIGURATIONS = ("Debug", "Release", "RelWithDebInfo", "MinSizeRel")
DEFAULT_BUILD_CONFIGURATION = "Debug"
BUILD_DIR_NAME = "jucebuilder_build"
SOURCE_DIR_NAME = "src"


class ProjectKind(enum.Enum):
    GUI_APPLICATION = "GuiApplication"
    AUDIO_PLUGIN = "AudioPlugin"
    CONSOLE_APP = "ConsoleApp"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value):
        """Map a template name onto a kind; anything unrecognized is UNKNOWN."""
        if isinstance(value, cls):
            return value
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == value:
                return kind
        return cls.UNKNOWN

    @classmethod
    def template_names(cls):
        return [kind.value for kind in cls if kind is not cls.UNKNOWN]

    @property
    def is_bundle(self):
        """Kinds whose macOS build output is an application bundle."""
        return self in (ProjectKind.GUI_APPLICATION, ProjectKind.AUDIO_PLUGIN)


@dataclass(frozen=True)
class ProjectMetadata:
    """Everything the core needs to know about a scaffolded project."""

    name: str
    root_path: str
    kind: ProjectKind = ProjectKind.UNKNOWN
    build_configuration: str = DEFAULT_BUILD_CONFIGURATION

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidConfigurationError("Project name must be a non-empty string.")
        if self.build_configuration not in BUILD_CONFIGURATIONS:
            raise InvalidConfigurationError(
                f"Invalid build configuration '{self.build_configuration}'. "
                f"Expected one of: {', '.join(BUILD_CONFIGURATIONS)}."
            )
        object.__setattr__(self, "root_path", os.path.abspath(self.root_path))
        object.__setattr__(self, "kind", ProjectKind.parse(self.kind))

    @property
    def build_dir(self):
        return os.path.join(self.root_path, BUILD_DIR_NAME)

    @property
    def source_dir(self):
        return os.path.join(self.root_path, SOURCE_DIR_NAME)

    def with_build_configuration(self, build_configuration):
        return ProjectMetadata(self.name, self.root_path, self.kind, build_configuration)
