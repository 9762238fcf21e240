import io

from markupsafe import Markup

from dhatless import ProgramPoint
from dhatless.reporters.templates import get_render_environment
from dhatless.reporters.templates import stream_report


def test_environment_is_cached():
    assert get_render_environment() is get_render_environment()


def test_include_file_is_not_interpolated():
    # GIVEN
    env = get_render_environment()

    # WHEN
    source = env.globals["include_file"]("assets/report.js")

    # THEN
    assert isinstance(source, Markup)
    assert 'getElementById("btn-openall")' in source


def test_stream_report_consumes_sites_lazily(make_report):
    # GIVEN
    report = make_report()
    output = io.StringIO()
    seen = []

    def sites():
        for count in (1, 2):
            # Everything up to the previous site is already written out.
            seen.append(output.getvalue().count("<details>"))
            yield count, ProgramPoint(count, 1, ()), iter(["frame"])

    # WHEN
    stream_report(
        kind="report",
        outfile=output,
        title="title",
        report=report,
        sites=sites(),
    )

    # THEN
    assert seen == [0, 1]
    assert output.getvalue().count("<details>") == 2
