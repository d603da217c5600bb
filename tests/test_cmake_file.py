import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from jucebuilder.utils.cmake_file import read_cmake_file, register_source
from jucebuilder.utils.source_injector import Outcome


class TestRegisterSource(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.cmakelists = os.path.join(self.test_dir, "CMakeLists.txt")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _write(self, contents):
        with open(self.cmakelists, "w", encoding="utf-8", newline="") as f:
            f.write(contents)

    @patch("jucebuilder.utils.cmake_file.logger")
    def test_writes_updated_file(self, mock_logger):
        self._write("target_sources(app\r\n    PRIVATE\r\n        a.cpp\r\n)\r\n")
        result = register_source(self.cmakelists, "b.cpp")
        self.assertEqual(result.outcome, Outcome.UPDATED)
        self.assertEqual(
            read_cmake_file(self.cmakelists),
            "target_sources(app\r\n    PRIVATE\r\n        a.cpp\r\n        b.cpp\r\n)\r\n",
        )
        self.assertFalse(os.path.exists(self.cmakelists + ".tmp"))
        mock_logger.warning.assert_called_once()

    @patch("jucebuilder.utils.cmake_file.logger")
    @patch("jucebuilder.utils.cmake_file.write_cmake_file")
    def test_unchanged_file_is_not_rewritten(self, mock_write, mock_logger):
        self._write("target_sources(app\n    PRIVATE\n        a.cpp\n)\n")
        result = register_source(self.cmakelists, "a.cpp")
        self.assertFalse(result.changed)
        mock_write.assert_not_called()

    @patch("jucebuilder.utils.cmake_file.logger")
    def test_fallback_append_warns(self, mock_logger):
        self._write("project(app)\n")
        result = register_source(self.cmakelists, "a.cpp")
        self.assertEqual(result.outcome, Outcome.APPENDED)
        self.assertIn("a.cpp", read_cmake_file(self.cmakelists))
        mock_logger.warning.assert_called_once()
        self.assertIn("appended", mock_logger.warning.call_args[0][0])

    @patch("jucebuilder.utils.cmake_file.logger")
    def test_marker_insertion_does_not_warn(self, mock_logger):
        self._write("# JUCEBUILDER_SOURCES_BEGIN\n# JUCEBUILDER_SOURCES_END\n")
        register_source(self.cmakelists, "a.cpp")
        self.assertEqual(
            read_cmake_file(self.cmakelists),
            "# JUCEBUILDER_SOURCES_BEGIN\na.cpp\n# JUCEBUILDER_SOURCES_END\n",
        )
        mock_logger.warning.assert_not_called()

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            register_source(self.cmakelists, "a.cpp")


if __name__ == "__main__":
    unittest.main()
