"""Register a source file in a CMake ``target_sources`` list.

Strategies are tried in order:

1. the entry already appears in the script: nothing to do;
2. a ``# JUCEBUILDER_SOURCES_BEGIN`` / ``# JUCEBUILDER_SOURCES_END`` pair:
   insert right before the end marker;
3. a multi-line ``target_sources(...)`` call: insert into its ``PRIVATE``
   list, creating that list when the call has none;
4. append a new managed ``target_sources`` block and report a warning.

Only inserted lines are new; every other byte of the script is kept.
"""

import enum
import re
from dataclasses import dataclass
from typing import Optional

from ..errors import InjectionError
from .text_scanner import (
    block_end,
    find_first_matching_marker,
    leading_whitespace,
)

SOURCES_BEGIN_MARKER = "# JUCEBUILDER_SOURCES_BEGIN"
SOURCES_END_MARKER = "# JUCEBUILDER_SOURCES_END"
MANAGED_BLOCK_COMMENT = "# jucebuilder managed sources"
PRIVATE_LABEL = "PRIVATE"
SECTION_LABELS = ("PRIVATE", "PUBLIC", "INTERFACE")
INDENT_STEP = "    "

_TARGET_SOURCES_RE = re.compile(r"^\s*target_sources\s*\(")


class Outcome(enum.Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    APPENDED = "appended"


@dataclass(frozen=True)
class InjectionResult:
    text: str
    outcome: Outcome
    strategy: str
    warning: Optional[str] = None

    @property
    def changed(self):
        return self.outcome is not Outcome.UNCHANGED


def _newline_for(lines):
    for line in lines:
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith("\n"):
            return "\n"
        if line.endswith("\r"):
            return "\r"
    return "\n"


def _is_listed(document_text, entry):
    # A listed entry stands alone: "Processor.cpp" is not "PluginProcessor.cpp".
    pattern = rf"(?<![\w./-]){re.escape(entry)}(?![\w.])"
    return re.search(pattern, document_text) is not None


def _starts_with_label(line):
    return line.lstrip().startswith(SECTION_LABELS)


def _insert_with_markers(lines, entry, newline):
    begin = find_first_matching_marker(lines, lambda line: SOURCES_BEGIN_MARKER in line)
    end = find_first_matching_marker(lines, lambda line: SOURCES_END_MARKER in line)
    if begin is None or end is None or end <= begin:
        return None
    lines.insert(end, f"{leading_whitespace(lines[end])}{entry}{newline}")
    return lines


def _insert_into_private_list(lines, private_idx, end_idx, entry, newline):
    insertion_idx = private_idx + 1
    while insertion_idx < end_idx:
        stripped = lines[insertion_idx].lstrip()
        if stripped.startswith(")") or _starts_with_label(lines[insertion_idx]):
            break
        insertion_idx += 1

    sibling = find_first_matching_marker(
        lines[:insertion_idx], lambda line: line.strip() != "", start=private_idx + 1
    )
    if sibling is not None:
        indent = leading_whitespace(lines[sibling])
    else:
        indent = leading_whitespace(lines[private_idx]) + INDENT_STEP
    lines.insert(insertion_idx, f"{indent}{entry}{newline}")
    return lines


def _insert_into_target_sources(lines, entry, newline):
    start = 0
    while True:
        target_idx = find_first_matching_marker(
            lines, lambda line: _TARGET_SOURCES_RE.match(line) is not None, start=start
        )
        if target_idx is None:
            return None
        end_idx = block_end(lines, target_idx)
        if end_idx is None:
            return None
        if end_idx > target_idx:
            break
        # Single-line call, nothing to insert between.
        start = target_idx + 1

    private_idx = find_first_matching_marker(
        lines[:end_idx],
        lambda line: line.lstrip().startswith(PRIVATE_LABEL),
        start=target_idx + 1,
    )
    if private_idx is not None:
        return _insert_into_private_list(lines, private_idx, end_idx, entry, newline)

    label_indent = leading_whitespace(lines[target_idx]) + INDENT_STEP
    lines.insert(target_idx + 1, f"{label_indent}{PRIVATE_LABEL}{newline}")
    lines.insert(target_idx + 2, f"{label_indent}{INDENT_STEP}{entry}{newline}")
    return lines


def _managed_block(entry, newline):
    body = [
        MANAGED_BLOCK_COMMENT,
        "target_sources(${PROJECT_NAME}",
        f"{INDENT_STEP}{PRIVATE_LABEL}",
        f"{INDENT_STEP * 2}{SOURCES_BEGIN_MARKER}",
        f"{INDENT_STEP * 2}{entry}",
        f"{INDENT_STEP * 2}{SOURCES_END_MARKER}",
        ")",
    ]
    return newline.join(body) + newline


def inject(document_text, entry):
    """Return an :class:`InjectionResult` with ``entry`` registered in ``document_text``.

    Never fails because of the script's structure: when nothing recognizable is
    found a managed block is appended and the result carries a warning.
    Raises :class:`InjectionError` only for input that is not line-based text.
    """
    if not isinstance(document_text, str):
        raise InjectionError(f"Expected build script text, got {type(document_text).__name__}")
    if not isinstance(entry, str) or not entry.strip() or len(entry.splitlines()) > 1:
        raise InjectionError(f"Invalid source entry: {entry!r}")
    entry = entry.strip()

    if _is_listed(document_text, entry):
        return InjectionResult(document_text, Outcome.UNCHANGED, "present")

    lines = document_text.splitlines(keepends=True)
    newline = _newline_for(lines)

    updated = _insert_with_markers(list(lines), entry, newline)
    if updated is not None:
        return InjectionResult("".join(updated), Outcome.UPDATED, "markers")

    updated = _insert_into_target_sources(list(lines), entry, newline)
    if updated is not None:
        return InjectionResult(
            "".join(updated),
            Outcome.UPDATED,
            "target_sources",
            warning="CMake markers not found; used fallback parsing for source insertion.",
        )

    prefix = document_text
    if prefix and not prefix.endswith(("\n", "\r")):
        prefix += newline
    if prefix:
        prefix += newline
    return InjectionResult(
        prefix + _managed_block(entry, newline),
        Outcome.APPENDED,
        "append",
        warning="Could not find a target_sources block; appended a new jucebuilder managed block.",
    )
