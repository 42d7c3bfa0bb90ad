"""Unit tests for response language detection."""

import pytest

from zibra.core.domain import LANGUAGE_CONFIG, LanguageConfig, detect_user_language

pytestmark = pytest.mark.unit


class TestDetectUserLanguage:
    @pytest.mark.parametrize("language", ["en", "en-NG", "en-SIMPLE", "es", "fr", "pt"])
    def test_supported_profile_language(self, language):
        assert detect_user_language(language) == language

    def test_unsupported_falls_back_to_default(self):
        assert detect_user_language("de") == "en"

    def test_missing_profile_language(self):
        assert detect_user_language(None) == "en"
        assert detect_user_language("") == "en"

    def test_device_language_ignored(self):
        assert detect_user_language(None, device_language="fr") == "en"

    def test_custom_config(self):
        config = LanguageConfig(supported_languages=("yo",), default_language="yo")

        assert detect_user_language("en", config=config) == "yo"

    def test_default_config(self):
        assert LANGUAGE_CONFIG.default_language == "en"
        assert "en-NG" in LANGUAGE_CONFIG.supported_languages
