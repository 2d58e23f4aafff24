"""Default output formatter - readable movie report."""

from fmv2fm2.models import Recording, describe_buttons

PREVIEW_FRAMES = 5


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _frame_preview(recording: Recording, limit: int = PREVIEW_FRAMES) -> list[str]:
    """Render the first frames as controller mnemonics, one line per frame."""
    size = recording.frame_record_size
    lines = []
    for frame in range(min(limit, recording.frame_count)):
        record = recording.input[frame * size : (frame + 1) * size]
        pads = " ".join(describe_buttons(value) for value in record[1:])
        lines.append(f"    {frame:>6}  [{record[0]}] {pads}")
    return lines


def format_default(recording: Recording) -> str:
    """Format a recording as a multi-line report."""
    lines = []

    lines.append("## MOVIE")
    lines.append(f"  ROM:        {recording.rom_file_name}")
    lines.append(f"  Checksum:   base64:{recording.rom_checksum}")
    lines.append(f"  GUID:       {recording.id}")
    lines.append(f"  Frames:     {recording.frame_count}")
    lines.append(f"  Rerecords:  {recording.rerecord_count}")
    ports = ", ".join(f"port{p}" for p in recording.active_ports) or "none"
    lines.append(f"  Ports:      {ports}")
    lines.append(f"  PAL:        {_yes_no(recording.pal_flag)}")
    lines.append(f"  Binary:     {_yes_no(recording.binary)}")

    if recording.comments:
        lines.append("")
        lines.append("## COMMENTS")
        for comment in recording.comments:
            # FMV text fields are NUL-padded to a fixed width
            content = comment.content.rstrip("\x00")
            lines.append(f"  {comment.subject}: {content}")

    if recording.subtitles:
        lines.append("")
        lines.append("## SUBTITLES")
        for subtitle in recording.subtitles:
            lines.append(f"  {subtitle.frame}: {subtitle.content}")

    preview = _frame_preview(recording)
    if preview:
        lines.append("")
        lines.append(f"## INPUT (first {len(preview)} frames)")
        lines.extend(preview)

    return "\n".join(lines)
