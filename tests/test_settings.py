import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from pexels_api.errors import ConfigurationError
from pexels_api.settings import (
    DEFAULT_BASE_URL,
    ClientConfig,
    Credentials,
    build_client_config,
    credentials_from_env,
    default_per_page,
    load_settings,
    settings_section,
)


class TestCredentials(TestCase):
    def test_empty_api_key_is_rejected(self) -> None:
        for api_key in ("", "   "):
            with self.subTest(api_key=api_key):
                with self.assertRaises(ConfigurationError):
                    Credentials(api_key=api_key)

    def test_api_key_is_hidden_from_repr(self) -> None:
        credentials = Credentials(api_key="secret-key")
        self.assertNotIn("secret-key", repr(credentials))
        self.assertNotIn("secret-key", repr(ClientConfig(credentials=credentials)))

    def test_credentials_are_immutable(self) -> None:
        credentials = Credentials(api_key="secret-key")
        with self.assertRaises(AttributeError):
            credentials.api_key = "other"

    def test_credentials_from_env(self) -> None:
        with patch("pexels_api.settings.config", return_value="env-key"):
            self.assertEqual(credentials_from_env().api_key, "env-key")

    def test_missing_env_key_is_a_configuration_error(self) -> None:
        with patch("pexels_api.settings.config", return_value=""):
            with self.assertRaises(ConfigurationError) as context:
                credentials_from_env()
        self.assertIn("PEXELS_API_KEY", str(context.exception))


class TestSettingsFile(TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.tmp_dir.name)

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def test_missing_file_yields_defaults(self) -> None:
        settings = load_settings(self.base / "missing.yaml")
        config = build_client_config(settings, Credentials(api_key="k"))
        self.assertEqual(settings, {})
        self.assertEqual(config.base_url, DEFAULT_BASE_URL)
        self.assertIsNone(config.timeout)

    def test_settings_are_applied(self) -> None:
        path = self.base / "settings.yaml"
        path.write_text(
            "pexels:\n  base_url: http://localhost:8080\n  timeout_seconds: 12\n",
            encoding="utf-8",
        )

        config = build_client_config(load_settings(path), Credentials(api_key="k"))

        self.assertEqual(config.base_url, "http://localhost:8080")
        self.assertEqual(config.timeout, 12.0)

    def test_invalid_yaml_is_a_configuration_error(self) -> None:
        path = self.base / "settings.yaml"
        path.write_text("pexels: [unclosed\n", encoding="utf-8")
        with self.assertRaises(ConfigurationError):
            load_settings(path)

    def test_invalid_base_url_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            ClientConfig(credentials=Credentials(api_key="k"), base_url="api.pexels.com")

    def test_malformed_values_are_configuration_errors(self) -> None:
        for text in (
            "pexels:\n  timeout_seconds: soon\n",
            "pexels:\n  timeout_seconds: true\n",
            "pexels:\n  timeout_seconds: -1\n",
            "pexels: [base_url]\n",
        ):
            with self.subTest(text=text):
                path = self.base / "settings.yaml"
                path.write_text(text, encoding="utf-8")
                with self.assertRaises(ConfigurationError):
                    build_client_config(load_settings(path), Credentials(api_key="k"))

    def test_default_per_page(self) -> None:
        self.assertEqual(default_per_page({}), 15)
        self.assertEqual(default_per_page({"pexels": {"default_per_page": None}}), 15)
        self.assertEqual(default_per_page({"pexels": {"default_per_page": "40"}}), 40)
        for value in ("abc", 0, 81, False):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    default_per_page({"pexels": {"default_per_page": value}})

    def test_section_must_be_a_mapping(self) -> None:
        self.assertEqual(settings_section({"logging": None}, "logging"), {})
        with self.assertRaises(ConfigurationError):
            settings_section({"logging": "DEBUG"}, "logging")
