"""Template rendering for target blocks."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class TemplateRenderer(ABC):
    """Abstract base class for template rendering."""

    @abstractmethod
    def render(self, name: str, template: str, data: Mapping[str, str]) -> str:
        """Substitute data into template and return the text."""
        pass


class FormatTemplateRenderer(TemplateRenderer):
    """Render templates with str.format_map.

    Only the template text is interpreted; substituted values are inserted
    verbatim, so braces or ``$`` in target content are left alone.
    """

    def render(self, name: str, template: str, data: Mapping[str, str]) -> str:
        """Render template."""
        logger.debug(f"Rendering template '{name}'")
        return template.format_map(data)


class ScriptedTemplateRenderer(TemplateRenderer):
    """Mock renderer for testing - returns scripted output or raises a scripted error."""

    def __init__(self, output: str = "", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.rendered: list[tuple[str, dict[str, str]]] = []

    def render(self, name: str, template: str, data: Mapping[str, str]) -> str:
        """Record the call and return the scripted result."""
        self.rendered.append((name, dict(data)))
        if self.error is not None:
            raise self.error
        return self.output
