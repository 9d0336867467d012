"""Language registry, keyed by phonemizer tag."""

from deltaphon.language.base import Language
from deltaphon.language.delta_english import DELTA_ENGLISH
from deltaphon.types import ConfigurationError

LANGUAGES: dict[str, Language] = {
    DELTA_ENGLISH.tag: DELTA_ENGLISH,
}


def get_language(tag: str) -> Language:
    """Look up a language by tag (case-insensitive)."""
    for key, language in LANGUAGES.items():
        if key.lower() == tag.strip().lower():
            return language
    raise ConfigurationError(
        f"Unknown language {tag!r}; available: {', '.join(sorted(LANGUAGES))}"
    )


__all__ = ["Language", "LANGUAGES", "get_language"]
