"""Unit tests for the atomic text writer."""

import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from csvso.utils.exceptions import OutputWriteError
from csvso.utils.files import write_text_atomic


class TestWriteTextAtomic(unittest.TestCase):
    """Unit tests for write_text_atomic."""

    def setUp(self) -> None:
        self._old_umask = os.umask(0o022)

    def tearDown(self) -> None:
        os.umask(self._old_umask)

    def test_should_create_new_file_with_umask_mode(self) -> None:
        # arrange
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.txt")

            # act
            write_text_atomic(path, "hello\n")

            # assert
            self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o644)
            self.assertEqual(Path(path).read_text(encoding="utf-8"), "hello\n")

    def test_should_keep_existing_file_mode(self) -> None:
        # arrange
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.txt")
            Path(path).write_text("old", encoding="utf-8")
            os.chmod(path, 0o640)

            # act
            write_text_atomic(path, "new")

            # assert
            self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o640)
            self.assertEqual(Path(path).read_text(encoding="utf-8"), "new")

    def test_should_leave_target_and_no_temp_file_on_failure(self) -> None:
        # arrange
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.txt")
            Path(path).write_text("old", encoding="utf-8")

            # act / assert
            with patch("csvso.utils.files.os.replace", side_effect=OSError("disk full")):
                with self.assertRaises(OutputWriteError):
                    write_text_atomic(path, "new")

            self.assertEqual(Path(path).read_text(encoding="utf-8"), "old")
            self.assertEqual(os.listdir(tmpdir), ["out.txt"])

    def test_should_wrap_directory_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = os.path.join(tmpdir, "folder")
            os.mkdir(target)
            with self.assertRaises(OutputWriteError):
                write_text_atomic(target, "text")
            self.assertTrue(os.path.isdir(target))
            self.assertEqual(os.listdir(tmpdir), ["folder"])
