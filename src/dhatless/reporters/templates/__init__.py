"""Templates to render reports in HTML."""
from functools import lru_cache
from typing import Any
from typing import TextIO

import jinja2
from markupsafe import Markup


@lru_cache(maxsize=1)
def get_render_environment() -> jinja2.Environment:
    loader = jinja2.PackageLoader("dhatless.reporters")
    env = jinja2.Environment(
        loader=loader,
        autoescape=jinja2.select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    def include_file(name: str) -> Markup:
        """Include a file from the templates directory without
        interpolating its contents"""
        source, *_ = loader.get_source(env, name)
        return Markup(source)

    env.globals["include_file"] = include_file
    return env


def stream_report(*, kind: str, outfile: TextIO, **context: Any) -> None:
    """Render the *kind* template into *outfile* chunk by chunk.

    The template is driven by ``Template.generate``, so iterables in the
    context are consumed lazily and nothing is buffered beyond the chunk
    being written.
    """
    env = get_render_environment()
    template = env.get_template(kind + ".html")
    for chunk in template.generate(kind=kind, **context):
        outfile.write(chunk)
