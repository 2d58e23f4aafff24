"""JSON output formatter."""

import json
from typing import Any

from fmv2fm2.models import Recording


def to_dict(recording: Recording) -> dict[str, Any]:
    """Convert a recording to a dictionary.

    The binary input body is replaced by its frame count and size.

    Args:
        recording: Recording object

    Returns:
        Dictionary representation
    """
    data = recording.model_dump(mode="json", exclude={"input"})
    data["frame_count"] = recording.frame_count
    data["input_size"] = len(recording.input)
    return data


def format_json(recording: Recording, indent: int = 2) -> str:
    """Format a recording as a JSON string.

    Args:
        recording: Recording object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_dict(recording), indent=indent, ensure_ascii=False)


def format_json_list(recordings: list[Recording], indent: int = 2) -> str:
    """Format multiple recordings as a JSON array."""
    data = [to_dict(r) for r in recordings]
    return json.dumps(data, indent=indent, ensure_ascii=False)
