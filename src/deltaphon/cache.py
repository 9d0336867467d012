"""File-based caching for G2P predictions."""

import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

CACHE_DIR = Path(os.environ.get("DELTAPHON_CACHE_DIR", "~/.cache/deltaphon")).expanduser()


def word_hash(word: str) -> str:
    """Compute SHA-256 hash of a normalized word."""
    return hashlib.sha256(word.encode("utf-8")).hexdigest()


def _atomic_write(target: Path, data: bytes) -> None:
    """Write data to target atomically via temp file + rename."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        os.write(fd, data)
        os.close(fd)
        fd = -1
        os.replace(tmp, target)
    except OSError:
        if fd >= 0:
            os.close(fd)
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def _g2p_cache_path(word: str, cache_dir: Path | None = None) -> Path:
    root = CACHE_DIR if cache_dir is None else cache_dir
    return root / "g2p" / f"{word_hash(word)}.json"


def get_cached_g2p(word: str, cache_dir: Path | None = None) -> list[str] | None:
    """Return cached phonemes for a word, or None if not cached."""
    path = _g2p_cache_path(word, cache_dir)
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return None
    if not isinstance(data, dict) or data.get("word") != word:
        return None
    if not isinstance(data.get("phonemes"), list):
        return None
    logger.debug(f"Cache hit: g2p ({word})")
    return [str(p) for p in data["phonemes"]]


def store_g2p_cache(word: str, phonemes: list[str], cache_dir: Path | None = None) -> None:
    """Store a G2P prediction in cache."""
    path = _g2p_cache_path(word, cache_dir)
    payload = {"word": word, "phonemes": list(phonemes)}
    _atomic_write(path, json.dumps(payload).encode())
    logger.debug(f"Cached g2p ({word})")
