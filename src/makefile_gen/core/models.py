"""Data models for Makefile targets."""

from dataclasses import dataclass, field
from typing import Any

from makefile_gen.exceptions import InvalidArgumentError


def _has_whitespace(value: str) -> bool:
    return any(c.isspace() for c in value)


@dataclass
class TargetSpec:
    """A target to append to a Makefile."""

    name: str
    content: str | None = None
    dependencies: list[str] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def has_dependencies(self) -> bool:
        return bool(self.dependencies)

    def validate(self) -> None:
        """Reject names that would break the target declaration line."""
        if not self.name:
            raise InvalidArgumentError("target name cannot be empty")
        # Tabs and newlines would split the stanza just like spaces
        if _has_whitespace(self.name):
            raise InvalidArgumentError("target name cannot contain space")
        for dependency in self.dependencies:
            if _has_whitespace(dependency):
                raise InvalidArgumentError("target dependency name cannot contain space")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "content": self.content,
            "dependencies": self.dependencies,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TargetSpec":
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            content=data.get("content"),
            dependencies=list(data.get("dependencies") or []),
        )
