"""Keyword based filtering of allocation sites."""
import logging
import os
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from ._report import ProgramPoint
from ._report import Report
from .reporters.frame_tools import site_contains_keyword

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
_BLANKS = " \t"


def parse_ignore_list(text: str) -> List[str]:
    keywords = []
    for line in text.split("\n"):
        line = line.strip(_BLANKS)
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        keywords.append(line)
    return keywords


def load_ignore_list(path: Optional[Union[str, "os.PathLike[str]"]]) -> List[str]:
    """Read the keywords of an ignore file.

    No path means no filtering, so an empty list is returned.
    """
    if not path:
        return []
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fp:
        keywords = parse_ignore_list(fp.read())
    LOGGER.info("Loaded %d ignore keywords from %s", len(keywords), os.fspath(path))
    return keywords


def should_ignore(report: Report, site_index: int, keywords: Sequence[str]) -> bool:
    return any(site_contains_keyword(report, site_index, kw) for kw in keywords)


def iter_reported_sites(
    report: Report, keywords: Sequence[str]
) -> Iterator[Tuple[int, int, ProgramPoint]]:
    """Lazily yield the sites that survive filtering, in input order.

    Each item is ``(alloc_count, site_index, program_point)``, where
    ``alloc_count`` is the 1-based display number. Ignored sites don't
    consume a number.
    """
    alloc_count = 1
    for site_index, program_point in enumerate(report.program_points):
        if should_ignore(report, site_index, keywords):
            LOGGER.debug("Ignoring program point #%d", site_index)
            continue
        yield alloc_count, site_index, program_point
        alloc_count += 1
