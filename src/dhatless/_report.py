"""In-memory model of a DHAT JSON report."""
import json
import logging
import os
from dataclasses import dataclass
from typing import Any
from typing import Dict
from typing import Optional
from typing import TextIO
from typing import Tuple
from typing import Type
from typing import Union

from ._errors import ReportDecodeError
from ._errors import UnsupportedVersionError

LOGGER = logging.getLogger(__name__)

SUPPORTED_VERSION = 2

_TYPE_NAMES = {
    int: "an integer",
    str: "a string",
    bool: "a boolean",
    list: "an array",
}


@dataclass(frozen=True)
class ProgramPoint:
    # Mandatory in every mode.
    total_bytes: int
    total_blocks: int
    # Indices into Report.frame_table, innermost frame first.
    frames: Tuple[int, ...]

    # Present only when the report has bklt=true.
    total_lifetimes: Optional[int] = None
    max_bytes: Optional[int] = None
    max_blocks: Optional[int] = None
    bytes_at_tgmax: Optional[int] = None
    blocks_at_tgmax: Optional[int] = None
    bytes_at_tend: Optional[int] = None
    blocks_at_tend: Optional[int] = None

    # Present only when the report has bkacc=true. Negative elements of
    # ``accesses`` run-length encode the following element.
    reads: Optional[int] = None
    writes: Optional[int] = None
    accesses: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class Report:
    version: int
    invocation_mode: str
    stack_frame_verb: str
    block_lifetimes_recorded: bool
    block_accesses_recorded: bool
    time_unit: str
    command: str
    pid: int
    time_at_end: int
    program_points: Tuple[ProgramPoint, ...]
    frame_table: Tuple[Any, ...]

    byte_unit: str = "byte"
    bytes_unit: str = "bytes"
    blocks_unit: str = "blocks"
    mil_time_unit: Optional[str] = None
    short_lived_threshold: Optional[int] = None
    time_at_global_max: Optional[int] = None

    def get_frame(self, index: int) -> str:
        from .reporters.frame_tools import resolve_frame

        return resolve_frame(self, index)


def _is_instance(value: Any, expected: Type[Any]) -> bool:
    # JSON booleans decode to bool, which is also an int subclass.
    if isinstance(value, bool) and expected is int:
        return False
    return isinstance(value, expected)


def _require(doc: Dict[str, Any], key: str, expected: Type[Any], where: str) -> Any:
    try:
        value = doc[key]
    except KeyError:
        raise ReportDecodeError(f"Missing mandatory field {key!r} in {where}")
    if not _is_instance(value, expected):
        raise ReportDecodeError(
            f"Field {key!r} in {where} must be {_TYPE_NAMES[expected]},"
            f" not {type(value).__name__}"
        )
    return value


def _optional(doc: Dict[str, Any], key: str, expected: Type[Any], where: str) -> Any:
    if key not in doc:
        return None
    return _require(doc, key, expected, where)


def _parse_program_point(doc: Any, index: int) -> ProgramPoint:
    where = f"program point #{index}"
    if not isinstance(doc, dict):
        raise ReportDecodeError(f"Expected an object for {where}")

    accesses = _optional(doc, "acc", list, where)
    return ProgramPoint(
        total_bytes=_require(doc, "tb", int, where),
        total_blocks=_require(doc, "tbk", int, where),
        frames=tuple(_require(doc, "fs", list, where)),
        total_lifetimes=_optional(doc, "tl", int, where),
        max_bytes=_optional(doc, "mb", int, where),
        max_blocks=_optional(doc, "mbk", int, where),
        bytes_at_tgmax=_optional(doc, "gb", int, where),
        blocks_at_tgmax=_optional(doc, "gbk", int, where),
        bytes_at_tend=_optional(doc, "eb", int, where),
        blocks_at_tend=_optional(doc, "ebk", int, where),
        reads=_optional(doc, "rb", int, where),
        writes=_optional(doc, "wb", int, where),
        accesses=tuple(accesses) if accesses is not None else None,
    )


def report_from_dict(doc: Any) -> Report:
    """Build a :class:`Report` from an already decoded JSON document.

    The format version is checked before anything else, so that documents
    written in another format fail with :class:`UnsupportedVersionError`
    rather than with a complaint about some field.  Frame indices are not
    checked here: they are resolved lazily, when a frame is rendered.
    """
    where = "report"
    if not isinstance(doc, dict):
        raise ReportDecodeError("Expected a JSON object at the top level of the report")

    version = _require(doc, "dhatFileVersion", int, where)
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version, SUPPORTED_VERSION)

    mandatory = {
        "mode": str,
        "verb": str,
        "bklt": bool,
        "bkacc": bool,
        "tu": str,
        "cmd": str,
        "pid": int,
        "te": int,
        "pps": list,
        "ftbl": list,
    }
    fields = {key: _require(doc, key, kind, where) for key, kind in mandatory.items()}

    program_points = tuple(
        _parse_program_point(pp, i) for i, pp in enumerate(fields["pps"])
    )

    return Report(
        version=version,
        invocation_mode=fields["mode"],
        stack_frame_verb=fields["verb"],
        block_lifetimes_recorded=fields["bklt"],
        block_accesses_recorded=fields["bkacc"],
        time_unit=fields["tu"],
        command=fields["cmd"],
        pid=fields["pid"],
        time_at_end=fields["te"],
        program_points=program_points,
        frame_table=tuple(fields["ftbl"]),
        byte_unit=doc.get("bu", "byte"),
        bytes_unit=doc.get("bsu", "bytes"),
        blocks_unit=doc.get("bksu", "blocks"),
        mil_time_unit=doc.get("mtu"),
        short_lived_threshold=_optional(doc, "tuth", int, where),
        time_at_global_max=_optional(doc, "tg", int, where),
    )


def parse_report(fp: TextIO) -> Report:
    try:
        doc = json.load(fp)
    except json.JSONDecodeError as e:
        raise ReportDecodeError(f"Report is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ReportDecodeError(f"Report is not valid UTF-8 text: {e}") from e
    return report_from_dict(doc)


def load_report(path: Union[str, "os.PathLike[str]"]) -> Report:
    """Read and decode the DHAT report stored at *path*."""
    with open(path, encoding="utf-8", errors="replace") as fp:
        report = parse_report(fp)
    LOGGER.info(
        "Loaded %d program points and %d frames from %s",
        len(report.program_points),
        len(report.frame_table),
        os.fspath(path),
    )
    return report
