from typing import Any


class DhatlessError(Exception):
    """Exceptions raised in this package."""


class DhatlessCommandError(DhatlessError):
    """Exceptions raised from this package's CLI commands."""

    def __init__(self, *args: Any, exit_code: int) -> None:
        super().__init__(*args)
        self.exit_code = exit_code


class ReportDecodeError(DhatlessError):
    """The report is not a well-formed DHAT document."""


class UnsupportedVersionError(DhatlessError):
    """The report was written with a DHAT format version we can't read."""

    def __init__(self, found: Any, required: int) -> None:
        super().__init__(
            f"DHAT report version {found} is not supported, "
            f"only version {required} is supported"
        )
        self.found = found
        self.required = required


class FrameIndexError(DhatlessError, IndexError):
    """A program point references a frame that is not in the frame table."""


class FrameFormatError(DhatlessError, ValueError):
    """A frame table entry is not in the "<verb>: <symbol>" form."""
