"""Custom exceptions for makefile-gen."""


class MakefileGenError(Exception):
    """Base exception for all makefile-gen errors."""

    pass


class InvalidArgumentError(MakefileGenError):
    """Target name or dependency rejected before touching the file system."""

    pass


class MakefileIOError(MakefileGenError):
    """Reading, writing or opening the Makefile failed."""

    def __init__(self, action: str, path: str, cause: Exception) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        super().__init__(f"{action} {path}: {cause}")


class TemplateError(MakefileGenError):
    """Rendering a target template or writing the rendered block failed."""

    def __init__(self, action: str, cause: Exception) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"{action} template: {cause}")
