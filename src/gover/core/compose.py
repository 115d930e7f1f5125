"""Commit message composition from the commit template."""

from __future__ import annotations

import textwrap
from collections.abc import Mapping

import jinja2

from gover.core.message import Template
from gover.exceptions import TemplateRenderError

DEFAULT_WRAP_WIDTH = 72

_environment = jinja2.Environment(
    undefined=jinja2.ChainableUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def to_jinja_source(template: Template) -> str:
    """Rewrite ``{{.Name}}`` placeholders into Jinja2 expressions."""
    return "".join(
        f"{{{{ {segment.text} }}}}" if segment.is_placeholder else segment.text
        for segment in template.segments
    )


def render_commit_message(template: Template | str, values: Mapping[str, str]) -> str:
    """Fill the commit template with field values.

    Fields without a value render as empty text.

    Raises:
        TemplateRenderError: If the template cannot be rendered
    """
    if isinstance(template, str):
        template = Template.parse(template)

    try:
        return _environment.from_string(to_jinja_source(template)).render(values)
    except jinja2.TemplateError as e:
        raise TemplateRenderError(
            f"couldn't execute template\n{template.text}\nwith args:\n{dict(values)}\n{e}"
        ) from e


def wrap_text(text: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Wrap free text at word boundaries.

    Words longer than ``width`` are split.
    """
    if len(text) <= width:
        return text
    return textwrap.fill(text, width=width, break_on_hyphens=False)
