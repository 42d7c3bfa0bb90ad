"""Response language configuration."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageConfig:
    """Languages the assistant can respond in."""

    supported_languages: tuple[str, ...] = ("en", "en-NG", "en-SIMPLE", "es", "fr", "pt")
    default_language: str = "en"
    fallback_behavior: str = (
        "If your preferred language is not yet available, I'll respond in English. "
        "We're working on adding more language options."
    )
    rules: tuple[str, ...] = field(
        default=(
            "Maintain consistent tone across all languages",
            "Preserve legal protections and disclaimers in every language",
            "If translation unavailable, respond in English and acknowledge limitation",
        )
    )


LANGUAGE_CONFIG = LanguageConfig()


def detect_user_language(
    profile_language: str | None = None,
    device_language: str | None = None,
    config: LanguageConfig = LANGUAGE_CONFIG,
) -> str:
    """Pick the response language for a user.

    The profile language wins when supported; otherwise the default. The
    device language is accepted for callers but not consulted.
    """
    if profile_language and profile_language in config.supported_languages:
        return profile_language
    return config.default_language
