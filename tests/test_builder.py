import os
import shutil
import tempfile
import unittest
from unittest.mock import patch, MagicMock, call
from jucebuilder import builder
from jucebuilder.context import ProjectKind, ProjectMetadata
from jucebuilder.errors import ArtifactNotFoundError, BuildError
from jucebuilder.utils.platform import Platform


class TestBuilder(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.metadata = ProjectMetadata("MyApp", self.test_dir, ProjectKind.GUI_APPLICATION, "Release")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.run_shell_command', return_value=("", "", 0))
    def test_build_project_runs_configure_and_build(self, mock_run, mock_logger):
        self.assertTrue(builder.build_project(self.metadata, Platform.LINUX))
        self.assertTrue(os.path.isdir(self.metadata.build_dir))
        mock_run.assert_has_calls([
            call([
                "cmake", "-S", self.metadata.root_path, "-B", self.metadata.build_dir,
                "-DCMAKE_BUILD_TYPE=Release", "-DCMAKE_EXPORT_COMPILE_COMMANDS=ON",
            ], stream_output=True),
            call(["cmake", "--build", self.metadata.build_dir, "--config", "Release"], stream_output=True),
        ])
        mock_logger.warning.assert_called_once()

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.run_shell_command', return_value=("", "", 0))
    def test_build_project_copies_compile_commands(self, mock_run, mock_logger):
        os.makedirs(self.metadata.build_dir)
        with open(os.path.join(self.metadata.build_dir, builder.COMPILE_COMMANDS_FILE), "w") as f:
            f.write("[]")
        builder.build_project(self.metadata, Platform.MACOS)
        self.assertTrue(os.path.exists(os.path.join(self.test_dir, builder.COMPILE_COMMANDS_FILE)))
        mock_logger.warning.assert_not_called()

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.run_shell_command', return_value=("", "", 0))
    def test_build_project_skips_compile_commands_on_windows(self, mock_run, mock_logger):
        builder.build_project(self.metadata, Platform.WINDOWS)
        self.assertFalse(os.path.exists(os.path.join(self.test_dir, builder.COMPILE_COMMANDS_FILE)))
        mock_logger.warning.assert_not_called()

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.run_shell_command')
    def test_build_project_configure_failure(self, mock_run, mock_logger):
        mock_run.return_value = ("", "", 1)
        with self.assertRaises(BuildError) as cm:
            builder.build_project(self.metadata, Platform.LINUX)
        self.assertEqual(cm.exception.step, "configure")
        self.assertEqual(cm.exception.returncode, 1)
        self.assertEqual(mock_run.call_count, 1)

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.run_shell_command')
    def test_build_project_build_failure(self, mock_run, mock_logger):
        mock_run.side_effect = [("", "", 0), ("", "", 2)]
        with self.assertRaises(BuildError) as cm:
            builder.build_project(self.metadata, Platform.LINUX)
        self.assertEqual(cm.exception.step, "build")

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.build_project', return_value=True)
    @patch('jucebuilder.builder.resolve')
    @patch('jucebuilder.builder.run_shell_command', return_value=("", "", 0))
    def test_run_project_opens_bundle_on_macos(self, mock_run, mock_resolve, mock_build, mock_logger):
        mock_resolve.return_value = MagicMock(path="/build/MyApp.app", warnings=["skipped x"])
        self.assertEqual(builder.run_project(self.metadata, Platform.MACOS), 0)
        mock_run.assert_called_once_with(["open", "/build/MyApp.app"], stream_output=True, cwd=self.metadata.build_dir)
        mock_logger.warning.assert_called_once_with("skipped x")

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.build_project', return_value=True)
    @patch('jucebuilder.builder.resolve')
    @patch('jucebuilder.builder.run_shell_command', return_value=("", "", 3))
    def test_run_project_executes_binary(self, mock_run, mock_resolve, mock_build, mock_logger):
        mock_resolve.return_value = MagicMock(path="/build/Release/MyApp", warnings=[])
        self.assertEqual(builder.run_project(self.metadata, Platform.LINUX), 3)
        mock_run.assert_called_once_with(["/build/Release/MyApp"], stream_output=True, cwd=self.metadata.build_dir)
        query = mock_resolve.call_args[0][0]
        self.assertEqual(query.platform, Platform.LINUX)
        self.assertEqual(query.project, self.metadata)

    @patch('jucebuilder.builder.logger')
    @patch('jucebuilder.builder.build_project', return_value=True)
    @patch('jucebuilder.builder.run_shell_command')
    def test_run_project_without_artifact(self, mock_run, mock_build, mock_logger):
        os.makedirs(self.metadata.build_dir)
        with self.assertRaises(ArtifactNotFoundError):
            builder.run_project(self.metadata, Platform.LINUX)
        mock_run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
