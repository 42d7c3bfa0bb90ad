"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from zibra.config.settings import PACKAGED_RESOURCES_DIR, Settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ZIBRA_CORPUS_DIR",
        "ZIBRA_SEARCH_RESULT_LIMIT",
        "ZIBRA_SEARCH_FALLBACK_LIMIT",
        "ZIBRA_TEMPLATES_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.default_priority == 50
        assert settings.search_result_limit == 8
        assert settings.search_fallback_limit == 3
        assert settings.require_catch_all is False
        assert settings.log_level == "INFO"

    def test_packaged_corpus_by_default(self):
        settings = Settings(_env_file=None)

        assert settings.resolved_corpus_dir == PACKAGED_RESOURCES_DIR
        assert settings.templates_path == PACKAGED_RESOURCES_DIR / "templates.json"
        assert settings.templates_path.exists()

    def test_corpus_dir_override(self, tmp_path):
        settings = Settings(_env_file=None, corpus_dir=tmp_path)

        assert settings.help_articles_path == tmp_path / "driver_help.json"
        assert settings.synonyms_path == tmp_path / "synonyms.json"

    def test_environment_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ZIBRA_SEARCH_RESULT_LIMIT", "5")
        monkeypatch.setenv("ZIBRA_CORPUS_DIR", str(tmp_path))

        settings = Settings(_env_file=None)

        assert settings.search_result_limit == 5
        assert settings.corpus_dir == tmp_path

    @pytest.mark.parametrize("field", ["search_result_limit", "search_fallback_limit"])
    def test_limits_must_be_positive(self, field):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_file_names_stripped(self):
        settings = Settings(_env_file=None, templates_file="\ufeff custom.json ")

        assert settings.templates_file == "custom.json"
