"""Runtime settings read from the environment.

Env variables:
- DELTAPHON_DATA_DIR (default: ~/.local/share/deltaphon)
- DELTAPHON_CACHE_DIR (default: ~/.cache/deltaphon)
- DELTAPHON_LANGUAGE (default: EN DELTA)
- DELTAPHON_TRANSITION_MS (default: 100)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from deltaphon.types import ConfigurationError

DEFAULT_LANGUAGE = "EN DELTA"
DEFAULT_TRANSITION_MS = 100.0


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    cache_dir: Path
    language: str = DEFAULT_LANGUAGE
    transition_ms: float = DEFAULT_TRANSITION_MS

    @property
    def plugins_dir(self) -> Path:
        """Where editable per-language dictionaries live."""
        return self.data_dir / "plugins"


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Raises:
        ConfigurationError: if DELTAPHON_TRANSITION_MS is not a positive number.
    """
    env = os.environ if env is None else env

    raw_ms = env.get("DELTAPHON_TRANSITION_MS", str(DEFAULT_TRANSITION_MS))
    try:
        transition_ms = float(raw_ms)
    except ValueError:
        raise ConfigurationError(
            f"DELTAPHON_TRANSITION_MS must be a number, got {raw_ms!r}"
        ) from None
    if transition_ms <= 0:
        raise ConfigurationError(
            f"DELTAPHON_TRANSITION_MS must be positive, got {transition_ms}"
        )

    return Settings(
        data_dir=Path(env.get("DELTAPHON_DATA_DIR", "~/.local/share/deltaphon")).expanduser(),
        cache_dir=Path(env.get("DELTAPHON_CACHE_DIR", "~/.cache/deltaphon")).expanduser(),
        language=env.get("DELTAPHON_LANGUAGE", DEFAULT_LANGUAGE),
        transition_ms=transition_ms,
    )
