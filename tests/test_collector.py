"""
Tests for input collection.

Entries are keyed by basename, later arguments win on collisions, and
standard input gets a fresh UUID name on every read.
"""

from __future__ import annotations

import io
import uuid
from pathlib import Path

import pytest

from gister.exceptions import InputReadError, UsageError
from gister.services.collector import InputCollectorService
from tests.conftest import RecordingLogger


def write(path: Path, text: str) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_entries_are_keyed_by_basename(tmp_path: Path) -> None:
    paths = [
        write(tmp_path / 'a.txt', 'alpha'),
        write(tmp_path / 'nested' / 'deeper' / 'b.py', 'print(1)\n'),
    ]

    files = InputCollectorService().collect(paths)

    assert files == {'a.txt': 'alpha', 'b.py': 'print(1)\n'}


def test_shared_basename_last_write_wins(tmp_path: Path, logger: RecordingLogger) -> None:
    first = write(tmp_path / 'one' / 'notes.md', 'first')
    second = write(tmp_path / 'two' / 'notes.md', 'second')
    other = write(tmp_path / 'other.md', 'other')

    files = InputCollectorService(logger=logger).collect([first, other, second])

    assert files == {'notes.md': 'second', 'other.md': 'other'}
    [warning] = logger.at('warning')
    assert first in warning and second in warning


def test_stdin_entry_named_with_fresh_uuid() -> None:
    names = []
    for _ in range(2):
        collector = InputCollectorService(stdin=io.BytesIO(b'hello'))
        files = collector.collect(['-'])
        [(name, content)] = files.items()
        assert content == 'hello'
        assert uuid.UUID(name).version == 4
        names.append(name)

    assert names[0] != names[1]


def test_stdin_and_files_mix(tmp_path: Path, logger: RecordingLogger) -> None:
    path = write(tmp_path / 'a.txt', 'alpha')

    files = InputCollectorService(stdin=io.BytesIO('héllo'.encode()), logger=logger).collect(['-', path])

    assert len(files) == 2
    assert files['a.txt'] == 'alpha'
    assert 'héllo' in files.values()
    assert logger.at('debug') == ['Reading standard input', f'Reading file: {path}']


def test_no_paths_is_usage_error() -> None:
    with pytest.raises(UsageError) as exc_info:
        InputCollectorService().collect([])

    assert exc_info.value.exit_code == 2


def test_missing_file_names_the_path(tmp_path: Path) -> None:
    missing = str(tmp_path / 'nope.txt')

    with pytest.raises(InputReadError) as exc_info:
        InputCollectorService().collect([missing])

    assert exc_info.value.source == missing
    assert missing in str(exc_info.value)


def test_directory_is_not_readable(tmp_path: Path) -> None:
    with pytest.raises(InputReadError):
        InputCollectorService().collect([str(tmp_path)])


def test_binary_content_rejected(tmp_path: Path) -> None:
    path = tmp_path / 'image.png'
    path.write_bytes(b'\x89PNG\r\n\x1a\n\xff\xfe')

    with pytest.raises(InputReadError, match='not UTF-8'):
        InputCollectorService().collect([str(path)])


def test_stdin_read_failure() -> None:
    class BrokenStream(io.BytesIO):
        def read(self, size: int | None = -1) -> bytes:
            raise OSError('stream closed')

    with pytest.raises(InputReadError, match='standard input'):
        InputCollectorService(stdin=BrokenStream()).collect(['-'])


def test_backslash_in_file_name_rejected(tmp_path: Path) -> None:
    path = write(tmp_path / 'odd\\name.txt', 'x')

    with pytest.raises(InputReadError, match='not a valid gist file name'):
        InputCollectorService().collect([path])
