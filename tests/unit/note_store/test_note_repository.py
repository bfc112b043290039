"""Unit tests for note_store.note_repository module."""

import os
import stat
from unittest.mock import patch

import pytest

from src.note_store.errors import FilesystemError
from src.note_store.models import Note
from src.note_store.note_repository import NoteRepository


class TestNoteModel:
    """Test cases for the Note dataclass."""

    @pytest.mark.parametrize("file_path,title", [
        ("notes/Meeting.md", "Meeting"),
        ("/vault/Project Plan.md", "Project Plan"),
        ("README", "README"),
        ("a/b/release.notes.md", "release.notes"),
    ])
    def test_title_is_file_name_without_extension(self, file_path, title):
        assert Note(file_path=file_path).title == title


class TestNoteRepositoryLoad:
    """Test cases for NoteRepository.load()."""

    def test_load_reads_content(self, tmp_path):
        note_file = tmp_path / "Meeting.md"
        note_file.write_text("# Meeting\n", encoding="utf-8")

        note = NoteRepository().load(str(note_file))

        assert note.file_path == str(note_file)
        assert note.content == "# Meeting\n"
        assert note.title == "Meeting"

    def test_load_preserves_crlf(self, tmp_path):
        """Line endings are returned exactly as stored."""
        note_file = tmp_path / "Windows.md"
        note_file.write_bytes(b"line one\r\nline two\r\n")

        note = NoteRepository().load(str(note_file))

        assert note.content == "line one\r\nline two\r\n"

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FilesystemError) as exc_info:
            NoteRepository().load(str(tmp_path / "missing.md"))

        assert exc_info.value.operation == "read"
        assert "Note not found" in str(exc_info.value)

    def test_load_directory_raises(self, tmp_path):
        with pytest.raises(FilesystemError):
            NoteRepository().load(str(tmp_path))

    def test_load_too_large_raises(self, tmp_path):
        note_file = tmp_path / "Big.md"
        note_file.write_text("x" * 101)

        with pytest.raises(FilesystemError) as exc_info:
            NoteRepository(max_file_size=100).load(str(note_file))

        assert "exceeds maximum allowed size" in str(exc_info.value)

    def test_load_invalid_utf8_raises(self, tmp_path):
        note_file = tmp_path / "Binary.md"
        note_file.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(FilesystemError) as exc_info:
            NoteRepository().load(str(note_file))

        assert exc_info.value.operation == "read"


class TestNoteRepositorySave:
    """Test cases for NoteRepository.save()."""

    def test_save_writes_content(self, tmp_path):
        note_file = tmp_path / "Meeting.md"
        note_file.write_text("old")

        NoteRepository().save(Note(file_path=str(note_file), content="new\r\ntext"))

        assert note_file.read_bytes() == b"new\r\ntext"

    def test_save_creates_new_file(self, tmp_path):
        note_file = tmp_path / "New.md"

        NoteRepository().save(Note(file_path=str(note_file), content="# New"))

        assert note_file.read_text() == "# New"

    def test_save_leaves_no_temp_files(self, tmp_path):
        note_file = tmp_path / "Meeting.md"
        note_file.write_text("old")

        NoteRepository().save(Note(file_path=str(note_file), content="new"))

        assert sorted(os.listdir(tmp_path)) == ["Meeting.md"]

    def test_save_preserves_file_mode(self, tmp_path):
        note_file = tmp_path / "Meeting.md"
        note_file.write_text("old")
        os.chmod(note_file, 0o644)

        NoteRepository().save(Note(file_path=str(note_file), content="new"))

        assert stat.S_IMODE(os.stat(note_file).st_mode) == 0o644

    def test_save_failure_keeps_original_and_cleans_up(self, tmp_path):
        """A failed replace leaves the original note and no temp file."""
        note_file = tmp_path / "Meeting.md"
        note_file.write_text("old")

        with patch("src.note_store.note_repository.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(FilesystemError) as exc_info:
                NoteRepository().save(Note(file_path=str(note_file), content="new"))

        assert exc_info.value.operation == "write"
        assert "disk full" in str(exc_info.value)
        assert note_file.read_text() == "old"
        assert sorted(os.listdir(tmp_path)) == ["Meeting.md"]

    def test_save_into_missing_directory_raises(self, tmp_path):
        note = Note(file_path=str(tmp_path / "missing" / "Meeting.md"), content="x")

        with pytest.raises(FilesystemError):
            NoteRepository().save(note)
