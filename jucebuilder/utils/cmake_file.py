import contextlib
import os

from ..cli_logger import logger
from .source_injector import inject


def read_cmake_file(path):
    # newline="" keeps CRLF endings intact.
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_cmake_file(path, contents):
    """Write ``contents`` next to ``path`` and atomically move it into place."""
    temp_path = path + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            f.write(contents)
        os.replace(temp_path, path)
    except OSError:
        with contextlib.suppress(OSError):
            if os.path.exists(temp_path):
                os.remove(temp_path)
        raise


def register_source(cmakelists_path, entry):
    """Add ``entry`` to the CMake script at ``cmakelists_path``.

    Returns the :class:`~jucebuilder.utils.source_injector.InjectionResult`;
    the file is only rewritten when the result changed the text.
    """
    contents = read_cmake_file(cmakelists_path)
    result = inject(contents, entry)
    if not result.changed:
        logger.info(f"{entry} is already listed in {cmakelists_path}")
        return result

    write_cmake_file(cmakelists_path, result.text)
    if result.warning:
        logger.warning(f"Warning: {result.warning}")
    logger.info(f"Added {entry} to {cmakelists_path}")
    return result
