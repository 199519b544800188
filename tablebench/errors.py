"""Exception hierarchy shared by the template layer, runner and CLI."""

from __future__ import annotations


class TablebenchError(Exception):
    """Base class for all tablebench errors."""


class TemplateLoadError(TablebenchError):
    """The template file could not be read or failed to parse."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"template {path!r}: {reason}")
        self.path = path
        self.reason = reason


class RenderError(TablebenchError):
    """Rendering a sub-template failed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"render of {name!r} failed: {reason}")
        self.name = name
        self.reason = reason


__all__ = ["TablebenchError", "TemplateLoadError", "RenderError"]
