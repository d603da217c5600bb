import os
import json
import shutil
import tempfile
import toml
import unittest
from click.testing import CliRunner
from jucebuilder import config
from jucebuilder.commands.config import config as config_command
from jucebuilder.context import ProjectKind
from jucebuilder.errors import ConfigVersionError


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "config_version": 1,
            "project": {
                "name": "TestApp",
                "template": "ConsoleApp",
            },
            "build": {
                "type": "Debug",
            },
        }
        config.save_config(self.sample_config, path=self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        cfg = config.load_config(path=self.test_dir)
        self.assertEqual(cfg, {})

    def test_load_config_invalid_toml(self):
        with open(self.config_path, "w") as f:
            f.write("[project\nname = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_save_and_load_config(self):
        """Test saving a config and then loading it back."""
        self.assertTrue(os.path.exists(self.config_path))
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config, self.sample_config)
        with open(self.config_path, "r") as f:
            toml_content = toml.load(f)
        self.assertEqual(toml_content, self.sample_config)

    def test_load_project_metadata(self):
        metadata = config.load_project_metadata(self.test_dir)
        self.assertEqual(metadata.name, "TestApp")
        self.assertEqual(metadata.kind, ProjectKind.CONSOLE_APP)
        self.assertEqual(metadata.build_configuration, "Debug")
        self.assertEqual(metadata.root_path, os.path.abspath(self.test_dir))

    def test_load_project_metadata_override_and_fallbacks(self):
        os.remove(self.config_path)
        metadata = config.load_project_metadata(self.test_dir, build_type="Release")
        self.assertEqual(metadata.name, os.path.basename(self.test_dir))
        self.assertEqual(metadata.kind, ProjectKind.UNKNOWN)
        self.assertEqual(metadata.build_configuration, "Release")

    def test_load_project_metadata_rejects_newer_version(self):
        self.sample_config["config_version"] = config.CONFIG_VERSION + 1
        config.save_config(self.sample_config, path=self.test_dir)
        with self.assertRaises(ConfigVersionError):
            config.load_project_metadata(self.test_dir)

    def test_remember_build_type(self):
        self.assertTrue(config.remember_build_type(self.test_dir, "RelWithDebInfo"))
        self.assertEqual(config.load_config(self.test_dir)["build"]["type"], "RelWithDebInfo")
        self.assertEqual(config.load_config(self.test_dir)["project"]["name"], "TestApp")

    def test_get_value(self):
        """Test getting a value from the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'build.type'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'Debug')

    def test_get_non_existent_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'project.nonexistent'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Error: Key 'project.nonexistent' not found", result.output)

    def test_set_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'build.type', 'Release'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config['build']['type'], 'Release')

    def test_set_invalid_build_type(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'build.type', 'Fast'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Invalid value 'Fast'", result.output)
        self.assertEqual(config.load_config(path=self.test_dir)['build']['type'], 'Debug')

    def test_list_config(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['list'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)

    def test_view_without_config(self):
        os.remove(self.config_path)
        runner = CliRunner()
        result = runner.invoke(config_command, ['view'], obj={"path": self.test_dir})
        self.assertIn("Error: No jucebuilder.toml found.", result.output)


if __name__ == "__main__":
    unittest.main()
