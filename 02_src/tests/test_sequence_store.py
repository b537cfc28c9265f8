"""Tests for FileSequenceStore."""

import logging

import pytest

from aurora.protocols import FileSequenceStore


class TestSequenceLoad:
    def test_missing_file_starts_at_zero(self, sequence_store):
        assert sequence_store.load() == 0

    def test_loads_saved_value(self, sequence_path):
        sequence_path.write_text("42", encoding="utf-8")
        assert FileSequenceStore(sequence_path).load() == 42

    def test_tolerates_whitespace(self, sequence_path):
        sequence_path.write_text(" 7\n", encoding="utf-8")
        assert FileSequenceStore(sequence_path).load() == 7

    @pytest.mark.parametrize("contents", ["", "abc", "12x", "-5"])
    def test_invalid_contents_default_to_zero(self, sequence_path, contents, caplog):
        sequence_path.write_text(contents, encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert FileSequenceStore(sequence_path).load() == 0
        assert caplog.records

    def test_unreadable_path_defaults_to_zero(self, tmp_path):
        # A directory where the file should be cannot be read as text
        store = FileSequenceStore(tmp_path)
        assert store.load() == 0


class TestSequenceSave:
    def test_save_overwrites(self, sequence_store, sequence_path):
        sequence_store.save(1)
        sequence_store.save(2)
        assert sequence_path.read_text(encoding="utf-8") == "2"

    def test_save_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "seq.txt"
        FileSequenceStore(path).save(5)
        assert path.read_text(encoding="utf-8") == "5"

    def test_save_leaves_no_temp_files(self, sequence_store, tmp_path):
        sequence_store.save(3)
        assert [p.name for p in tmp_path.iterdir()] == ["protocol_sequence.txt"]

    def test_save_failure_raises_oserror(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        store = FileSequenceStore(blocker / "seq.txt")
        with pytest.raises(OSError):
            store.save(1)
