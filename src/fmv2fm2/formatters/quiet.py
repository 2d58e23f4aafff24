"""Quiet output formatter - one-line summary."""

from fmv2fm2.models import Recording


def format_quiet(recording: Recording) -> str:
    """Format a recording as a one-line summary.

    Format: rom | frames | rerecords | ports | guid
    """
    ports = ",".join(str(port) for port in recording.active_ports) or "none"
    parts = [
        recording.rom_file_name,
        f"{recording.frame_count} frames",
        f"{recording.rerecord_count} rerecords",
        f"ports: {ports}",
        str(recording.id),
    ]
    return " | ".join(parts)

