import os
import shutil
from .cli_logger import logger
from .errors import BuildError
from .utils import ArtifactQuery, MatchStrategy, resolve, run_shell_command
from .utils.platform import Platform, current_platform

COMPILE_COMMANDS_FILE = "compile_commands.json"


def _configure_command(metadata):
    return [
        "cmake",
        "-S", metadata.root_path,
        "-B", metadata.build_dir,
        f"-DCMAKE_BUILD_TYPE={metadata.build_configuration}",
        "-DCMAKE_EXPORT_COMPILE_COMMANDS=ON",
    ]


def _build_command(metadata):
    return ["cmake", "--build", metadata.build_dir, "--config", metadata.build_configuration]


def _copy_compile_commands(metadata):
    """Copy compile_commands.json next to the project sources for editor tooling."""
    source = os.path.join(metadata.build_dir, COMPILE_COMMANDS_FILE)
    if not os.path.exists(source):
        logger.warning(f"{COMPILE_COMMANDS_FILE} not found in {metadata.build_dir}; skipping copy.")
        return False
    shutil.copy(source, os.path.join(metadata.root_path, COMPILE_COMMANDS_FILE))
    logger.info(f"Copied {COMPILE_COMMANDS_FILE} to the project root.")
    return True


def build_project(metadata, platform=None):
    """Configure and build ``metadata`` with CMake. Raises BuildError on failure."""
    platform = platform or current_platform()
    logger.info(f"Building project '{metadata.name}' ({metadata.build_configuration})...")
    os.makedirs(metadata.build_dir, exist_ok=True)

    logger.section("Configuring")
    _, _, returncode = run_shell_command(_configure_command(metadata), stream_output=True)
    if returncode != 0:
        raise BuildError("configure", returncode)

    logger.section("Compiling")
    _, _, returncode = run_shell_command(_build_command(metadata), stream_output=True)
    if returncode != 0:
        raise BuildError("build", returncode)

    # Visual Studio generators do not produce compile_commands.json.
    if platform is not Platform.WINDOWS:
        _copy_compile_commands(metadata)

    logger.success("Build successful!")
    return True


def find_executable(metadata, platform=None):
    query = ArtifactQuery(metadata, platform or current_platform())
    logger.debug(
        f"Resolving executable for '{metadata.name}' "
        f"(template: {metadata.kind.value}, build type: {metadata.build_configuration}, "
        f"strategy: {query.strategy.value})"
    )
    resolution = resolve(query)
    for warning in resolution.warnings:
        logger.warning(warning)
    return query, resolution.path


def run_project(metadata, platform=None):
    """Build the project, then launch its executable and return the exit code."""
    platform = platform or current_platform()
    build_project(metadata, platform)

    logger.info(f"Running project '{metadata.name}'...")
    query, executable_path = find_executable(metadata, platform)
    logger.info(f"Starting executable: {executable_path}")

    if query.strategy is MatchStrategy.BUNDLE:
        command = ["open", executable_path]
    else:
        command = [executable_path]
    _, _, returncode = run_shell_command(command, stream_output=True, cwd=metadata.build_dir)
    logger.info(f"Execution completed with exit code {returncode}.")
    return returncode
