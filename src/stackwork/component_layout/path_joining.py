"""Segment joining that never lets a later segment replace the earlier ones."""

from __future__ import annotations

from pathlib import Path, PurePath


def join_below(first: Path | str, *segments: Path | str) -> Path:
    """Join ``segments`` below ``first``.

    An absolute segment is appended under the path built so far instead of
    replacing it, and empty segments add no level.
    """
    joined = Path(first)
    for segment in segments:
        segment_path = PurePath(segment)
        if segment_path.anchor:
            segment_path = segment_path.relative_to(segment_path.anchor)
        joined = joined / segment_path
    return joined
