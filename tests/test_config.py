"""
Test configuration loading.
"""

import os
import tempfile
import unittest

from becrypt.config import DEFAULT_COST, Config
from becrypt.errors import ConfigError, ExitCode


def create_test_config(content: str) -> str:
    """Create a temporary test configuration file."""
    temp_file = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    temp_file.write(content)
    temp_file.close()

    return temp_file.name


def cleanup_test_config(config_path: str) -> None:
    """Clean up temporary test configuration file."""
    try:
        os.unlink(config_path)
    except OSError:
        pass


class TestCase(unittest.TestCase):
    """Base test case with common utilities."""

    config_content = """
hashing:
    default_cost: 12

prompt:
    confirm: true
    attempts: 5

logging:
    level: debug
    file:
        enabled: false
        path: test.log
        max_size: 10MB
        backup_count: 5
"""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.test_config_path = create_test_config(self.config_content)

    def tearDown(self) -> None:
        """Clean up test fixtures."""
        cleanup_test_config(self.test_config_path)


class TestConfig(TestCase):
    """Test configuration loading."""

    def test_load_from_file(self):
        config = Config.from_file(self.test_config_path)
        assert config.hashing.default_cost == 12
        assert config.prompt.confirm is True
        assert config.prompt.attempts == 5
        assert config.logging.level == "DEBUG"
        assert config.logging.file.max_size == "10MB"

    def test_defaults(self):
        config = Config()
        assert config.hashing.default_cost == DEFAULT_COST == 10
        assert config.prompt.confirm is False
        assert config.prompt.attempts == 3
        assert config.logging.level == "WARNING"
        assert config.logging.file.enabled is False

    def test_from_env_without_variable(self):
        assert Config.from_env({}) == Config()

    def test_from_env_blank_variable(self):
        assert Config.from_env({"BECRYPT_CONFIG": "  "}) == Config()

    def test_from_env_with_variable(self):
        config = Config.from_env({"BECRYPT_CONFIG": self.test_config_path})
        assert config.hashing.default_cost == 12

    def test_missing_file(self):
        with self.assertRaises(ConfigError) as ctx:
            Config.from_file("/nonexistent/becrypt.yaml")
        assert "not found" in ctx.exception.message
        assert ctx.exception.exit_code == ExitCode.CONFIG


class TestEmptyConfig(TestCase):
    config_content = ""

    def test_empty_file_uses_defaults(self):
        assert Config.from_file(self.test_config_path) == Config()


class TestInvalidYaml(TestCase):
    config_content = "hashing: [unclosed\n"

    def test_parse_error(self):
        with self.assertRaises(ConfigError) as ctx:
            Config.from_file(self.test_config_path)
        assert "Failed to parse YAML" in ctx.exception.message


class TestNonMappingConfig(TestCase):
    config_content = "- just\n- a list\n"

    def test_must_be_dictionary(self):
        with self.assertRaises(ConfigError) as ctx:
            Config.from_file(self.test_config_path)
        assert "must be a dictionary" in ctx.exception.message


class TestOutOfRangeDefaultCost(TestCase):
    config_content = "hashing:\n    default_cost: 40\n"

    def test_rejected(self):
        with self.assertRaises(ConfigError) as ctx:
            Config.from_file(self.test_config_path)
        assert "default_cost" in ctx.exception.message


class TestUnknownLogLevel(TestCase):
    config_content = "logging:\n    level: chatty\n"

    def test_rejected(self):
        with self.assertRaises(ConfigError):
            Config.from_file(self.test_config_path)


class TestZeroAttempts(TestCase):
    config_content = "prompt:\n    attempts: 0\n"

    def test_rejected(self):
        with self.assertRaises(ConfigError):
            Config.from_file(self.test_config_path)
