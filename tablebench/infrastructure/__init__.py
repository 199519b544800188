"""
Infrastructure package for tablebench.

Wraps the external templating engine (Jinja2): compiling template documents and
rendering their named blocks into text sinks. Keep this layer focused on the
engine boundary, decoupled from timing and reporting logic.
"""

from tablebench.infrastructure.template_factory import (
    TableTemplate,
    build_environment,
    load_template,
    parse_template,
)

__all__ = [
    "TableTemplate",
    "build_environment",
    "load_template",
    "parse_template",
]
