"""Generate Makefiles and append targets to them."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from makefile_gen.core.filesystem import DEFAULT_FILE_MODE, FileSystem, OSFileSystem
from makefile_gen.core.models import TargetSpec
from makefile_gen.core.renderer import FormatTemplateRenderer, TemplateRenderer
from makefile_gen.core.templates import BOILERPLATE, MAKEFILE_NAME, select_target_template
from makefile_gen.exceptions import InvalidArgumentError, MakefileIOError, TemplateError

logger = logging.getLogger(__name__)


def resolve_makefile_path(path: str | os.PathLike, fs: FileSystem | None = None) -> Path:
    """Return the Makefile path for a user supplied file or directory path.

    The path is normalized first. An existing directory resolves to the
    ``Makefile`` inside it; anything else, including a path whose status
    cannot be read, is taken to be the Makefile itself.
    """
    fs = fs or OSFileSystem()
    normalized = Path(os.path.normpath(os.fspath(path)))
    try:
        is_dir = fs.is_dir(normalized)
    except OSError as e:
        logger.debug(f"Cannot stat {normalized} ({e}), treating it as the Makefile path")
        return normalized
    if is_dir:
        return normalized / MAKEFILE_NAME
    return normalized


class MakefileGenerator:
    """Writes the boilerplate Makefile and appends target stanzas to it."""

    def __init__(
        self,
        fs: FileSystem | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.fs = fs or OSFileSystem()
        self.renderer = renderer or FormatTemplateRenderer()

    def resolve(self, path: str | os.PathLike) -> Path:
        """Resolve path using this generator's file system."""
        return resolve_makefile_path(path, self.fs)

    def generate(self, path: str | os.PathLike, overwrite: bool = False) -> Path:
        """Write the boilerplate Makefile and return its path.

        Without ``overwrite`` the boilerplate is put in front of whatever the
        file already holds. The file is always rewritten in full.
        """
        makefile_path = self.resolve(path)
        content = BOILERPLATE.encode("utf-8")
        if not overwrite:
            try:
                existing = self.fs.read_file(makefile_path)
            except FileNotFoundError:
                existing = b""
            except OSError as e:
                raise MakefileIOError("reading Makefile at", str(makefile_path), e) from e
            content += existing

        try:
            self.fs.write_file(makefile_path, content, DEFAULT_FILE_MODE)
        except OSError as e:
            raise MakefileIOError("writing Makefile at", str(makefile_path), e) from e

        logger.info(f"Generated Makefile at {makefile_path} (overwrite={overwrite})")
        return makefile_path

    def render_target(self, spec: TargetSpec) -> str:
        """Validate spec and return the block that add_target would append."""
        spec.validate()
        template = select_target_template(spec.has_content, spec.has_dependencies)
        data = {
            "name": spec.name,
            "dependencies": " ".join(spec.dependencies),
            "content": spec.content or "",
        }
        try:
            return self.renderer.render("target", template, data)
        except Exception as e:
            raise TemplateError("parsing", e) from e

    def add_target(
        self,
        path: str | os.PathLike,
        name: str,
        content: str | None = None,
        dependencies: Sequence[str] | None = None,
    ) -> Path:
        """Append a target stanza to an existing Makefile and return its path.

        The file must already exist. Existing content is never inspected, so
        adding the same target twice yields two stanzas.
        """
        if isinstance(dependencies, str):
            raise InvalidArgumentError("target dependencies must be a sequence of names, not a string")
        spec = TargetSpec(name=name, content=content, dependencies=list(dependencies or []))
        spec.validate()

        makefile_path = self.resolve(path)
        try:
            handle = self.fs.open_append(makefile_path)
        except OSError as e:
            raise MakefileIOError("opening", str(makefile_path), e) from e

        # Buffered writes may only fail when the handle is flushed on close
        try:
            with handle:
                block = self.render_target(spec)
                # Undecodable argv bytes arrive as surrogates and go back out unchanged
                handle.write(block.encode("utf-8", errors="surrogateescape"))
        except OSError as e:
            raise TemplateError("executing", e) from e

        logger.info(f"Added target '{spec.name}' to {makefile_path}")
        return makefile_path
