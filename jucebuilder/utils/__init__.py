from .command_executor import run_shell_command, format_command
from .platform import Platform, current_platform, executable_name
from .text_scanner import paren_delta, leading_whitespace_width, find_first_matching_marker
from .source_injector import inject, InjectionResult, Outcome
from .cmake_file import register_source
from .artifact_resolver import (
    ArtifactQuery,
    CandidatePath,
    MatchStrategy,
    Resolution,
    collect_candidates,
    filter_candidates,
    pick_best_match,
    resolve,
)
