"""makefile-gen - Generate Makefiles and append targets to them."""

from makefile_gen.core.filesystem import FileSystem, InMemoryFileSystem, OSFileSystem
from makefile_gen.core.makefile import MakefileGenerator, resolve_makefile_path
from makefile_gen.core.models import TargetSpec
from makefile_gen.core.renderer import FormatTemplateRenderer, ScriptedTemplateRenderer, TemplateRenderer
from makefile_gen.core.templates import BOILERPLATE, MAKEFILE_NAME
from makefile_gen.exceptions import (
    InvalidArgumentError,
    MakefileGenError,
    MakefileIOError,
    TemplateError,
)
from makefile_gen.server import MakefileGenServer, setup_logging

__version__ = "0.1.0"

__all__ = [
    "BOILERPLATE",
    "MAKEFILE_NAME",
    "TargetSpec",
    "FileSystem",
    "OSFileSystem",
    "InMemoryFileSystem",
    "TemplateRenderer",
    "FormatTemplateRenderer",
    "ScriptedTemplateRenderer",
    "MakefileGenerator",
    "resolve_makefile_path",
    "MakefileGenServer",
    "setup_logging",
    "MakefileGenError",
    "InvalidArgumentError",
    "MakefileIOError",
    "TemplateError",
]
