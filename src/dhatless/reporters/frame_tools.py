"""Tools for resolving and matching the stack frames of a report."""
from typing import TYPE_CHECKING
from typing import Iterator

from .._errors import FrameFormatError
from .._errors import FrameIndexError

if TYPE_CHECKING:
    from .._report import Report

FRAME_SEPARATOR = ": "


def resolve_frame(report: "Report", index: int) -> str:
    """Return the symbol of the frame table entry at *index*.

    Entries look like ``"<verb>: <symbol>"``; everything after the first
    separator is the symbol, even if it contains further separators.
    """
    table = report.frame_table
    if isinstance(index, bool) or not isinstance(index, int):
        raise FrameIndexError(f"Invalid frame index {index!r}")
    if not 0 <= index < len(table):
        raise FrameIndexError(
            f"Frame index {index} is out of range for a frame table"
            f" of {len(table)} entries"
        )

    entry = table[index]
    if not isinstance(entry, str):
        raise FrameFormatError(f"Frame table entry {index} is not a string: {entry!r}")
    _, sep, symbol = entry.partition(FRAME_SEPARATOR)
    if not sep:
        raise FrameFormatError(
            f"Frame table entry {index} has no {FRAME_SEPARATOR!r} separator: {entry!r}"
        )
    return symbol


def site_contains_keyword(report: "Report", site_index: int, keyword: str) -> bool:
    for frame in report.program_points[site_index].frames:
        if keyword in resolve_frame(report, frame):
            return True
    return False


def iter_site_frames(report: "Report", site_index: int) -> Iterator[str]:
    """Yield the symbols of a site's stack, outermost call first."""
    for frame in reversed(report.program_points[site_index].frames):
        yield resolve_frame(report, frame)
