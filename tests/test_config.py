"""Tests for configuration management."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from bt_string_utils.config import Config, get_config, reset_config, set_config
from bt_string_utils.exceptions import ConfigurationError


class TestConfig(unittest.TestCase):
    """Test cases for Config dataclass."""

    def test_default_values(self):
        """Test that Config has sensible default values."""
        config = Config()

        self.assertEqual(config.outputs_dir, Path("outputs"))
        self.assertEqual(config.default_num_groups, 2)
        self.assertEqual(config.default_chunk_size, 1024)
        self.assertEqual(config.default_random_length, 16)
        self.assertEqual(config.log_level, "INFO")

    def test_from_env_with_defaults(self):
        """Test from_env() with no environment variables (uses defaults)."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()

            self.assertEqual(config, Config())

    def test_from_env_with_custom_values(self):
        """Test from_env() with custom environment variables."""
        env_vars = {
            "BT_STRINGS_OUTPUTS_DIR": "/custom/outputs",
            "BT_STRINGS_DEFAULT_NUM_GROUPS": "5",
            "BT_STRINGS_DEFAULT_CHUNK_SIZE": "4096",
            "BT_STRINGS_DEFAULT_RANDOM_LENGTH": "32",
            "BT_STRINGS_LOG_LEVEL": "DEBUG",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env()

            self.assertEqual(config.outputs_dir, Path("/custom/outputs"))
            self.assertEqual(config.default_num_groups, 5)
            self.assertEqual(config.default_chunk_size, 4096)
            self.assertEqual(config.default_random_length, 32)
            self.assertEqual(config.log_level, "DEBUG")

    def test_from_env_partial_override(self):
        """Test from_env() with only some environment variables set."""
        env_vars = {"BT_STRINGS_DEFAULT_NUM_GROUPS": "3", "BT_STRINGS_LOG_LEVEL": "WARNING"}

        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env()

            self.assertEqual(config.default_num_groups, 3)
            self.assertEqual(config.log_level, "WARNING")
            self.assertEqual(config.default_chunk_size, 1024)

    def test_from_env_non_integer(self):
        """Test from_env() reports non-integer values clearly."""
        with patch.dict(os.environ, {"BT_STRINGS_DEFAULT_CHUNK_SIZE": "big"}, clear=True):
            with self.assertRaises(ConfigurationError) as cm:
                Config.from_env()

        self.assertIn("BT_STRINGS_DEFAULT_CHUNK_SIZE", str(cm.exception))


class TestConfigValidation(unittest.TestCase):
    """Test cases for Config validation."""

    def test_validate_success(self):
        """Test successful validation with valid configuration."""
        Config().validate()

    def test_validate_non_positive_num_groups(self):
        """Test validation fails with zero or negative group counts."""
        for value in (0, -3):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError) as cm:
                    Config(default_num_groups=value).validate()
                self.assertEqual(str(cm.exception), "default_num_groups must be positive")

    def test_validate_non_positive_chunk_size(self):
        """Test validation fails with zero or negative chunk sizes."""
        for value in (0, -100):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError) as cm:
                    Config(default_chunk_size=value).validate()
                self.assertEqual(str(cm.exception), "default_chunk_size must be positive")

    def test_validate_negative_random_length(self):
        """Test validation fails with a negative random length."""
        with self.assertRaises(ConfigurationError):
            Config(default_random_length=-1).validate()

        Config(default_random_length=0).validate()

    def test_validate_invalid_log_level(self):
        """Test validation fails with invalid log level."""
        with self.assertRaises(ConfigurationError) as cm:
            Config(log_level="INVALID").validate()

        error_msg = str(cm.exception)
        self.assertIn("Invalid log_level: INVALID", error_msg)
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            self.assertIn(level, error_msg)

    def test_validate_log_level_case_insensitive(self):
        """Test validation accepts log levels in different cases."""
        for level in ["debug", "INFO", "Warning", "ERROR", "critical"]:
            Config(log_level=level).validate()


class TestConfigDirectoryManagement(unittest.TestCase):
    """Test cases for Config directory management."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up test fixtures."""
        self.temp_dir.cleanup()

    def test_ensure_directories_creates_outputs(self):
        """Test ensure_directories creates nested output directories."""
        outputs_dir = self.temp_path / "nested" / "outputs"
        config = Config(outputs_dir=outputs_dir)

        config.ensure_directories()

        self.assertTrue(outputs_dir.is_dir())

    def test_ensure_directories_existing(self):
        """Test ensure_directories works when the directory already exists."""
        config = Config(outputs_dir=self.temp_path)
        config.ensure_directories()
        config.ensure_directories()
        self.assertTrue(self.temp_path.is_dir())


class TestGlobalConfig(unittest.TestCase):
    """Test cases for the global configuration accessors."""

    def setUp(self):
        """Start every test without a cached config."""
        reset_config()

    def tearDown(self):
        """Leave no cached config behind."""
        reset_config()

    def test_get_config_loads_from_env(self):
        """Test get_config() reads the environment once and caches it."""
        with patch.dict(os.environ, {"BT_STRINGS_DEFAULT_NUM_GROUPS": "7"}, clear=True):
            config = get_config()

        self.assertEqual(config.default_num_groups, 7)
        self.assertIs(get_config(), config)

    def test_get_config_invalid_env(self):
        """Test get_config() validates values read from the environment."""
        with patch.dict(os.environ, {"BT_STRINGS_DEFAULT_NUM_GROUPS": "0"}, clear=True):
            with self.assertRaises(ConfigurationError):
                get_config()

    def test_set_config(self):
        """Test set_config() replaces the global instance."""
        custom = Config(default_num_groups=9)
        set_config(custom)
        self.assertIs(get_config(), custom)

    def test_set_config_validates(self):
        """Test set_config() rejects invalid configurations."""
        with self.assertRaises(ConfigurationError):
            set_config(Config(default_chunk_size=0))

    def test_reset_config(self):
        """Test reset_config() forces a reload."""
        set_config(Config(default_num_groups=9))
        reset_config()

        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_config().default_num_groups, 2)


if __name__ == "__main__":
    unittest.main()
