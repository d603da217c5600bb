"""Exceptions raised by the jucebuilder core and CLI glue."""


class JucebuilderError(Exception):
    """Base class for all jucebuilder errors."""


class InjectionError(JucebuilderError):
    """The build script could not be handled as a sequence of lines."""


class ResolutionError(JucebuilderError):
    """No runnable artifact could be resolved from the build output."""


class RootMissingError(ResolutionError):
    def __init__(self, root):
        self.root = root
        super().__init__(f"Build output directory not found at {root}. Build the project first.")


class ArtifactNotFoundError(ResolutionError):
    def __init__(self, configuration, platform=None, root=None):
        self.configuration = configuration
        self.platform = platform
        self.root = root
        message = f"Executable not found for build type: {configuration}"
        if platform is not None:
            message += f" (platform: {platform.value})"
        if root is not None:
            message += f" in {root}"
        super().__init__(message)


class InvalidConfigurationError(JucebuilderError, ValueError):
    """Project metadata failed validation."""


class ConfigVersionError(JucebuilderError):
    pass


class BuildError(JucebuilderError):
    def __init__(self, step, returncode):
        self.step = step
        self.returncode = returncode
        super().__init__(f"CMake {step} failed with exit code {returncode}")


class ProjectExistsError(JucebuilderError):
    pass


class UnknownTemplateError(JucebuilderError):
    pass


class ElementExistsError(JucebuilderError):
    pass


class VcsError(JucebuilderError):
    pass
