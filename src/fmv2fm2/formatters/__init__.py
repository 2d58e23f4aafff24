"""Output formatters for fmv2fm2."""

from .default import format_default
from .json import format_json, format_json_list, to_dict
from .quiet import format_quiet

__all__ = [
    "format_default",
    "format_json",
    "format_json_list",
    "format_quiet",
    "to_dict",
]
