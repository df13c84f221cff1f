"""
Input collection - turns path arguments into gist entries.

Each argument becomes one entry:
- '-' reads standard input; the entry is named with a random UUID
- anything else is read as a file; the entry is named after its basename
  (GitHub forbids path separators in gist file names)

Arguments sharing a basename collide: the later one wins.
"""

from __future__ import annotations

import sys
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from gister.exceptions import InputReadError, UsageError
from gister.protocols import LoggerProtocol, NullLogger
from gister.schemas.gist import PATH_SEPARATORS

__all__ = ['STDIN_SENTINEL', 'InputCollectorService']

STDIN_SENTINEL = '-'


class InputCollectorService:
    """Reads files and standard input into an entry name -> content mapping."""

    def __init__(self, stdin: BinaryIO | None = None, logger: LoggerProtocol | None = None) -> None:
        """
        Initialize collector.

        Args:
            stdin: Binary stream read for '-' (default: sys.stdin.buffer at read time)
            logger: Logger for progress and collision warnings
        """
        self.stdin = stdin
        self.logger = logger or NullLogger()

    def collect(self, paths: Sequence[str]) -> dict[str, str]:
        """
        Read every argument.

        Args:
            paths: File paths and/or '-' in command-line order

        Returns:
            Mapping of entry name to text content, in first-seen order

        Raises:
            UsageError: If paths is empty
            InputReadError: If a file or stdin can't be read or isn't UTF-8
        """
        if not paths:
            raise UsageError()

        files: dict[str, str] = {}
        sources: dict[str, str] = {}
        for path in paths:
            if path == STDIN_SENTINEL:
                name, content = self._read_stdin()
            else:
                name, content = self._read_file(path)

            if name in files:
                self.logger.warning(f'{path} replaces {sources[name]}: both upload as {name!r}')
            files[name] = content
            sources[name] = path

        return files

    def _read_stdin(self) -> tuple[str, str]:
        self.logger.debug('Reading standard input')
        stream = self.stdin if self.stdin is not None else sys.stdin.buffer
        try:
            data = stream.read()
        except OSError as e:
            raise InputReadError(STDIN_SENTINEL, str(e)) from e
        return str(uuid.uuid4()), _decode(STDIN_SENTINEL, data)

    def _read_file(self, path: str) -> tuple[str, str]:
        self.logger.debug(f'Reading file: {path}')
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise InputReadError(path, e.strerror or str(e)) from e
        if any(sep in file_path.name for sep in PATH_SEPARATORS):
            raise InputReadError(path, f'{file_path.name!r} is not a valid gist file name')
        return file_path.name, _decode(path, data)


def _decode(source: str, data: bytes) -> str:
    # Gists only hold text
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InputReadError(source, 'not UTF-8 text; binary files are not supported by gists') from e
