import cProfile
import sys
import tracemalloc
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from rich.console import Console

from .._errors import DhatlessCommandError

CPU_PROFILE_FILE = "profile.cpu"
MEMORY_PROFILE_FILE = "profile.mem"
LARGE_REPORT_SIZE = 100 * 1000 * 1000


def warn_if_report_is_too_big(report_path: Path) -> None:
    if report_path.stat().st_size > LARGE_REPORT_SIZE:
        Console(stderr=True).print(
            ":warning: [bold yellow] This DHAT report is large and may take a long"
            " time to process [/] :warning:\n\n"
            "The whole report is decoded in memory before the first allocation"
            " is written.\n"
        )


@contextmanager
def cpu_profile(enabled: bool, output: str = CPU_PROFILE_FILE) -> Iterator[None]:
    """Profile the CPU usage of the wrapped block into *output*."""
    if not enabled:
        yield
        return

    try:
        open(output, "wb").close()
    except OSError as e:
        raise DhatlessCommandError(
            f"Failed to create CPU profile {output}\nReason: {e}", exit_code=1
        )

    profiler = cProfile.Profile()
    profiler.enable()
    try:
        yield
    finally:
        profiler.disable()
        try:
            profiler.dump_stats(output)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)


@contextmanager
def memory_profile(enabled: bool, output: str = MEMORY_PROFILE_FILE) -> Iterator[None]:
    """Trace the allocations of the wrapped block and dump them to *output*.

    A failure to write the dump is reported, but doesn't fail the run.
    """
    if not enabled:
        yield
        return

    tracemalloc.start()
    try:
        yield
    finally:
        snapshot = tracemalloc.take_snapshot()
        tracemalloc.stop()
        try:
            snapshot.dump(output)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
