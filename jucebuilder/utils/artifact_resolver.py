"""Locate the runnable artifact in a CMake build output tree.

No build-tool introspection is used: every path under the build directory is
collected, filtered by naming rules for the target platform, then the
shortest path mentioning the requested build configuration wins.
"""

import enum
import os
import stat
from dataclasses import dataclass, field
from typing import List

from ..context import ProjectKind, ProjectMetadata
from ..errors import ArtifactNotFoundError, RootMissingError
from .platform import Platform, current_platform, executable_name

BUNDLE_EXTENSION = ".app"
STANDALONE_MARKER = "standalone"


class MatchStrategy(enum.Enum):
    BUNDLE = "bundle"
    BINARY = "binary"


@dataclass(frozen=True)
class CandidatePath:
    path: str
    relative_path: str
    name: str
    extension: str
    is_dir: bool
    is_executable: bool
    has_configuration: bool
    has_project_name: bool

    @classmethod
    def from_path(cls, path, project, platform, root=None):
        """Tag ``path``; configuration and Standalone tags only look below ``root``."""
        name = os.path.basename(path)
        relative_path = os.path.relpath(path, root) if root else path
        is_dir = os.path.isdir(path)
        return cls(
            path=path,
            relative_path=relative_path,
            name=name,
            extension=os.path.splitext(name)[1],
            is_dir=is_dir,
            is_executable=not is_dir and is_executable_file(path, platform),
            has_configuration=project.build_configuration in relative_path,
            has_project_name=project.name in name,
        )


@dataclass(frozen=True)
class ArtifactQuery:
    project: ProjectMetadata
    platform: Platform = field(default_factory=current_platform)

    @property
    def strategy(self):
        # Unknown kinds are matched as plain binaries, even on macOS.
        if self.platform is Platform.MACOS and self.project.kind.is_bundle:
            return MatchStrategy.BUNDLE
        return MatchStrategy.BINARY

    @property
    def root(self):
        return self.project.build_dir


@dataclass(frozen=True)
class Resolution:
    artifact: CandidatePath
    warnings: List[str] = field(default_factory=list)

    @property
    def path(self):
        return self.artifact.path


def is_executable_file(path, platform):
    if not os.path.isfile(path):
        return False
    if platform is Platform.WINDOWS:
        return os.path.splitext(path)[1].lower() == ".exe"
    if platform.is_unix:
        try:
            mode = os.stat(path).st_mode
        except OSError:
            return False
        return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
    return True


def collect_candidates(root):
    """Walk ``root`` depth-first and return ``(paths, warnings)``.

    Directories that cannot be listed are reported in ``warnings`` and
    skipped. Symlinked directories are listed but not descended into.
    """
    if not os.path.isdir(root):
        raise RootMissingError(root)

    paths = []
    warnings = []

    def _walk(directory):
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            if directory == root:
                raise RootMissingError(root) from e
            warnings.append(f"Skipped unreadable directory {directory}: {e.strerror or e}")
            return
        for entry in entries:
            paths.append(entry.path)
            try:
                descend = entry.is_dir(follow_symlinks=False)
            except OSError:
                descend = False
            if descend:
                _walk(entry.path)

    _walk(root)
    return paths, warnings


def filter_candidates(candidates, query):
    project = query.project
    if query.strategy is MatchStrategy.BUNDLE:
        selected = [
            c for c in candidates
            if c.extension == BUNDLE_EXTENSION and c.has_project_name
        ]
        if project.kind is ProjectKind.AUDIO_PLUGIN:
            # Only the standalone wrapper runs without a plugin host.
            selected = [c for c in selected if STANDALONE_MARKER in c.relative_path.lower()]
        return selected

    binary_name = executable_name(project.name, query.platform)
    return [c for c in candidates if c.name == binary_name and c.is_executable]


def pick_best_match(candidates):
    """Prefer the shortest path tagged with the build configuration, else the shortest."""
    ranked = sorted(candidates, key=lambda c: len(c.path))
    for candidate in ranked:
        if candidate.has_configuration:
            return candidate
    return ranked[0] if ranked else None


def resolve(query):
    """Return the :class:`Resolution` for ``query``.

    Raises :class:`RootMissingError` when the build directory is absent and
    :class:`ArtifactNotFoundError` when nothing survives filtering.
    """
    paths, warnings = collect_candidates(query.root)
    candidates = [CandidatePath.from_path(p, query.project, query.platform, query.root) for p in paths]
    best = pick_best_match(filter_candidates(candidates, query))
    if best is None:
        raise ArtifactNotFoundError(query.project.build_configuration, query.platform, query.root)
    return Resolution(best, warnings)
