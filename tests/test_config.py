"""
Unit tests for configuration loading.

Contract:
- Unset variables fall back to documented defaults
- Values are read once into a frozen AppConfig
"""

import dataclasses
import os
import unittest
from pathlib import Path
from unittest import mock

from swimtimes.client import API_URL
from swimtimes.config import AppConfig, load_config
from swimtimes.errors import ConfigError


class TestLoadConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = load_config(dotenv=False)
        self.assertEqual(config.center, "Huntingdon")
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.template_dir, Path("./templates"))
        self.assertEqual(config.api_url, API_URL)

    def test_environment_overrides(self) -> None:
        env = {
            "SWIMTIMES_CENTER": "St Ives",
            "SWIMTIMES_HOST": "0.0.0.0",
            "SWIMTIMES_PORT": "9000",
            "SWIMTIMES_TEMPLATE_DIR": "/srv/templates",
            "SWIMTIMES_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config(dotenv=False)
        self.assertEqual(config.center, "St Ives")
        self.assertEqual(config.host, "0.0.0.0")
        self.assertEqual(config.port, 9000)
        self.assertEqual(config.template_dir, Path("/srv/templates"))
        self.assertEqual(config.log_level, "DEBUG")

    def test_bad_port(self) -> None:
        with mock.patch.dict(os.environ, {"SWIMTIMES_PORT": "http"}, clear=True):
            with self.assertRaises(ConfigError):
                load_config(dotenv=False)

    def test_config_is_frozen(self) -> None:
        config = AppConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.center = "Elsewhere"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
