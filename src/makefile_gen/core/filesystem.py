"""File system access used to read, write and append to Makefiles."""

import errno
import io
import logging
import os
import stat
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


class FileSystem(ABC):
    """Abstract base class for file system operations."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Return whether path is a directory. Raises OSError if the lookup fails."""
        pass

    @abstractmethod
    def read_file(self, path: Path) -> bytes:
        """Read the whole file. Raises FileNotFoundError if it does not exist."""
        pass

    @abstractmethod
    def write_file(self, path: Path, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
        """Create or truncate path and write data."""
        pass

    @abstractmethod
    def open_append(self, path: Path) -> BinaryIO:
        """Open an existing file for appending. Never creates the file."""
        pass


class OSFileSystem(FileSystem):
    """File system operations backed by the os module."""

    def is_dir(self, path: Path) -> bool:
        return stat.S_ISDIR(os.stat(path).st_mode)

    def read_file(self, path: Path) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_file(self, path: Path, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    def open_append(self, path: Path) -> BinaryIO:
        # No O_CREAT: a missing file must fail here
        fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        return os.fdopen(fd, "ab")


class _MemoryAppendHandle(io.RawIOBase):
    """Append handle writing into an InMemoryFileSystem."""

    def __init__(self, fs: "InMemoryFileSystem", key: str) -> None:
        super().__init__()
        self._fs = fs
        self._key = key

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        if self.closed:
            raise ValueError("write to closed file")
        self._fs.calls.append(f"append:{self._key}")
        if self._fs.append_error is not None:
            raise self._fs.append_error
        self._fs.files[self._key] = self._fs.files[self._key] + bytes(data)
        return len(data)

    def close(self) -> None:
        if not self.closed:
            self._fs.closed_handles += 1
        super().close()


class InMemoryFileSystem(FileSystem):
    """Mock file system for testing - keeps files in memory with scripted failures."""

    def __init__(
        self,
        files: dict[str, bytes] | None = None,
        directories: Iterable[str] = (),
        stat_error: OSError | None = None,
        read_error: OSError | None = None,
        write_error: OSError | None = None,
        open_error: OSError | None = None,
        append_error: OSError | None = None,
    ) -> None:
        self.files: dict[str, bytes] = dict(files or {})
        self.directories: set[str] = set(directories)
        self.stat_error = stat_error
        self.read_error = read_error
        self.write_error = write_error
        self.open_error = open_error
        self.append_error = append_error
        self.modes: dict[str, int] = {}
        self.calls: list[str] = []
        self.closed_handles = 0

    def is_dir(self, path: Path) -> bool:
        key = str(path)
        self.calls.append(f"stat:{key}")
        if self.stat_error is not None:
            raise self.stat_error
        if key not in self.directories and key not in self.files:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        return key in self.directories

    def read_file(self, path: Path) -> bytes:
        key = str(path)
        self.calls.append(f"read:{key}")
        if self.read_error is not None:
            raise self.read_error
        if key not in self.files:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        return self.files[key]

    def write_file(self, path: Path, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
        key = str(path)
        self.calls.append(f"write:{key}")
        if self.write_error is not None:
            raise self.write_error
        self.files[key] = bytes(data)
        self.modes[key] = mode

    def open_append(self, path: Path) -> BinaryIO:
        key = str(path)
        self.calls.append(f"open:{key}")
        if self.open_error is not None:
            raise self.open_error
        if key not in self.files:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        return _MemoryAppendHandle(self, key)  # type: ignore[return-value]
