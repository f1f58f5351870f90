import os
import unittest
from unittest.mock import patch

from summary_utils.config_utils import (
    API_KEY_NAME,
    GEMINI_MODEL,
    MAX_ATTEMPTS,
    Settings,
    load_settings,
    resolve_api_key,
)


class TestResolveApiKey(unittest.TestCase):

    def test_environment_wins(self):
        with patch.dict(os.environ, {API_KEY_NAME: "from-env"}):
            self.assertEqual(resolve_api_key({API_KEY_NAME: "from-secrets"}), "from-env")

    def test_secrets_fallback(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_api_key({API_KEY_NAME: " from-secrets "}), "from-secrets")

    def test_missing_everywhere(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(resolve_api_key({}))
            self.assertIsNone(resolve_api_key({API_KEY_NAME: "   "}))
            self.assertIsNone(resolve_api_key({API_KEY_NAME: 123}))


class TestSettings(unittest.TestCase):

    def test_load_settings(self):
        with patch.dict(os.environ, {API_KEY_NAME: "abc"}):
            settings = load_settings({})
        self.assertEqual(settings.api_key, "abc")
        self.assertEqual(settings.model, GEMINI_MODEL)
        self.assertEqual(settings.max_attempts, MAX_ATTEMPTS)

    def test_endpoint_has_no_key(self):
        settings = Settings(api_key="secret")
        self.assertEqual(
            settings.endpoint,
            f"https://generativelanguage.googleapis.com/v1beta/models/{GEMINI_MODEL}:generateContent",
        )
        self.assertNotIn("secret", settings.endpoint)


if __name__ == "__main__":
    unittest.main()
