import logging
import os

import pytest

from prop2json.errors import PathNotFoundError
from prop2json.files import collect_files, expand_paths


class TestCollectFiles:
    """Test resolving a single path argument"""

    def test_single_file(self, tmp_path):
        """Test a file argument resolves to itself"""
        path = tmp_path / "app.conf"
        path.write_text("a = 1\n")

        assert collect_files(str(path)) == [str(path)]

    def test_directory_is_sorted_and_flat(self, tmp_path):
        """Test only regular files directly inside the directory are returned"""
        (tmp_path / "b.conf").write_text("b = 2\n")
        (tmp_path / "a.conf").write_text("a = 1\n")
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "c.conf").write_text("c = 3\n")

        assert collect_files(str(tmp_path)) == [
            os.path.join(str(tmp_path), "a.conf"),
            os.path.join(str(tmp_path), "b.conf"),
        ]

    def test_empty_directory(self, tmp_path):
        """Test an empty directory contributes no files"""
        assert collect_files(str(tmp_path)) == []

    def test_missing_path(self, tmp_path):
        """Test a nonexistent path raises with the path"""
        with pytest.raises(PathNotFoundError) as excinfo:
            collect_files(str(tmp_path / "nope"))

        assert excinfo.value.path == str(tmp_path / "nope")


class TestExpandPaths:
    """Test expanding several arguments"""

    def test_keeps_argument_order(self, tmp_path):
        """Test files follow the order of the arguments"""
        (tmp_path / "dir").mkdir()
        (tmp_path / "dir" / "x.conf").write_text("x = 1\n")
        single = tmp_path / "single.conf"
        single.write_text("s = 1\n")

        files = expand_paths([str(single), str(tmp_path / "dir")])

        assert files == [str(single), os.path.join(str(tmp_path / "dir"), "x.conf")]

    def test_missing_path_is_reported_and_skipped(self, tmp_path, caplog):
        """Test a missing argument is logged and the rest still resolve"""
        single = tmp_path / "single.conf"
        single.write_text("s = 1\n")
        missing = str(tmp_path / "missing")

        with caplog.at_level(logging.ERROR, logger="prop2json"):
            files = expand_paths([missing, str(single)])

        assert files == [str(single)]
        assert missing in caplog.text
