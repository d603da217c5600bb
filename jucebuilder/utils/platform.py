import enum
import os
import sys

WINDOWS_EXECUTABLE_SUFFIX = ".exe"


class Platform(enum.Enum):
    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"

    @property
    def is_unix(self):
        return self in (Platform.LINUX, Platform.MACOS)


def current_platform():
    if os.name == "nt":
        return Platform.WINDOWS
    if sys.platform == "darwin":
        return Platform.MACOS
    if sys.platform.startswith("linux"):
        return Platform.LINUX
    return Platform.OTHER


def executable_name(name, platform):
    if platform is Platform.WINDOWS:
        return f"{name}{WINDOWS_EXECUTABLE_SUFFIX}"
    return name
