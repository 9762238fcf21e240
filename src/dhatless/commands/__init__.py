import argparse
import logging
import sys
import textwrap
from typing import List
from typing import NoReturn
from typing import Optional

from dhatless._errors import DhatlessCommandError
from dhatless._errors import DhatlessError
from dhatless._logging import set_log_level
from dhatless._version import __version__

from .report import ReportCommand

_DESCRIPTION = textwrap.dedent(
    """\
    Generate a report with all allocations recorded in the given DHAT output file.

    By default, the generated report will be written to STDOUT as regular text.
    Use -html to generate a HTML report.

    Specific allocations can be ignored by using an ignore file.
    An ignore file contains keywords (e.g. my_function) which will be searched in
    the frame stack of all allocations.
    If the frame stack of an allocation contains one of the keywords, that
    allocation will not be added to the generated report.

    The ignore file must contain a list of keywords separated by newlines.
    Whitespace (' ' and '\\t') is trimmed from the start and end of the lines.
    Empty lines and comment lines (which start with '#') are ignored.

        Example:

        $ dhatless -i ignore.txt -html dhat.out.1234 > report.html
    """
)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"error: {message}\n")


def get_argument_parser() -> argparse.ArgumentParser:
    command = ReportCommand()
    parser = _ArgumentParser(
        description=_DESCRIPTION,
        prog="dhatless",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity. Option is additive and can be specified up to 3 times",
    )
    parser.add_argument(
        "-V",
        "-version",
        action="version",
        version=__version__,
        help="Displays the current version of dhatless",
    )
    parser.set_defaults(entrypoint=command.run)
    command.prepare_parser(parser)
    return parser


def determine_logging_level_from_verbosity(
    verbose_level: int,
) -> int:
    if verbose_level == 0:
        return logging.WARNING
    elif verbose_level == 1:
        return logging.INFO
    else:
        return logging.DEBUG


def main(args: Optional[List[str]] = None) -> int:
    if args is None:
        args = sys.argv[1:]

    parser = get_argument_parser()
    arg_values = parser.parse_args(args=args)
    set_log_level(determine_logging_level_from_verbosity(arg_values.verbose))

    try:
        arg_values.entrypoint(arg_values, parser)
    except DhatlessCommandError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except DhatlessError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    else:
        return 0
