"""
Template loading and rendering on top of Jinja2.

The benchmark treats the engine as an opaque renderer: a template document is
compiled once, then one of its named blocks ("sub-templates") is rendered into a
text sink on every iteration. Engine exceptions are translated into
`TemplateLoadError` (fatal, at load time) and `RenderError` (per render).
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, List, Sequence, TextIO

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from tablebench.errors import RenderError, TemplateLoadError

ITEMS_VARIABLE = "items"


def build_environment(search_path: str | Path = ".") -> Environment:
    """
    Create the Jinja2 environment used for benchmark templates.

    HTML autoescaping is enabled for ``.html``/``.htm`` sources and for string
    templates, matching what a production HTML renderer would pay for.
    """
    return Environment(
        loader=FileSystemLoader(str(search_path)),
        autoescape=select_autoescape(["html", "htm", "xml"], default_for_string=True),
    )


class TableTemplate:
    """
    Compiled template handle.

    Attributes
    ----------
    name : str
        File name (or label) the template was compiled from.
    """

    def __init__(self, template: Template, name: str) -> None:
        self._template = template
        self.name = name

    @property
    def sub_templates(self) -> List[str]:
        """Names of the blocks defined by the document."""
        return sorted(self._template.blocks)

    def has_sub_template(self, name: str) -> bool:
        return name in self._template.blocks

    def render_into(self, sink: TextIO, name: str, items: Sequence[Any]) -> None:
        """
        Render block ``name`` with ``items`` bound to ``items`` and write it to ``sink``.

        Raises
        ------
        RenderError
            If the block does not exist or evaluation fails.
        """
        block = self._template.blocks.get(name)
        if block is None:
            raise RenderError(name, f"no sub-template named {name!r} in {self.name}")
        try:
            context = self._template.new_context({ITEMS_VARIABLE: items})
            for chunk in block(context):
                sink.write(chunk)
        except Exception as exc:  # noqa: BLE001 - any engine failure is a render failure
            raise RenderError(name, str(exc)) from exc

    def render(self, name: str, items: Sequence[Any]) -> str:
        """Render block ``name`` and return the produced text."""
        buffer = io.StringIO()
        self.render_into(buffer, name, items)
        return buffer.getvalue()


def load_template(path: str | Path) -> TableTemplate:
    """
    Read and compile the template document at ``path``.

    Raises
    ------
    TemplateLoadError
        If the file is missing, unreadable, not valid UTF-8, or has a syntax error.
    """
    source_path = Path(path)
    env = build_environment(source_path.parent)
    try:
        template = env.get_template(source_path.name)
    except TemplateNotFound:
        raise TemplateLoadError(str(path), "file not found") from None
    except TemplateSyntaxError as exc:
        raise TemplateLoadError(str(path), f"line {exc.lineno}: {exc.message}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(str(path), str(exc)) from exc
    return TableTemplate(template, source_path.name)


def parse_template(source: str, name: str = "<string>") -> TableTemplate:
    """
    Compile a template from text instead of a file.

    Raises
    ------
    TemplateLoadError
        If the source has a syntax error.
    """
    env = build_environment()
    try:
        template = env.from_string(source)
    except TemplateSyntaxError as exc:
        raise TemplateLoadError(name, f"line {exc.lineno}: {exc.message}") from exc
    return TableTemplate(template, name)


__all__ = [
    "ITEMS_VARIABLE",
    "TableTemplate",
    "build_environment",
    "load_template",
    "parse_template",
]
