"""
Utility modules for simpletree.
"""

from simpletree.utils.bracket_notation import (
    EmptyTreeError,
    dump_tree,
    parse_tree,
    print_string_tree,
    render,
)
from simpletree.utils.logging import (
    get_logger,
    log_phase_transition,
    log_error_with_context,
)

__all__ = [
    "parse_tree",
    "render",
    "print_string_tree",
    "dump_tree",
    "EmptyTreeError",
    "get_logger",
    "log_phase_transition",
    "log_error_with_context",
]
