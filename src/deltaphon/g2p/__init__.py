"""Grapheme-to-phoneme lookup for lyrics.

Resolution order for a language: the editable dictionary in the plugin
folder, then the voicebank's own copy, then the ARPABET fallback.
"""

import logging
from importlib import resources
from pathlib import Path

import yaml

from deltaphon.g2p.arpabet import ArpabetG2p
from deltaphon.g2p.dictionary import G2pDictionary, G2pFallbacks, G2pResolver
from deltaphon.language import Language

logger = logging.getLogger(__name__)


def ensure_plugin_dictionary(language: Language, plugins_dir: Path) -> Path:
    """Return the plugin dictionary path, writing the bundled template if missing."""
    path = Path(plugins_dir) / language.dictionary_name
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        template = resources.files("deltaphon.language").joinpath("data", language.template)
        path.write_bytes(template.read_bytes())
        logger.info(f"Wrote dictionary template to {path}")
    return path


def build_g2p(
    language: Language,
    plugins_dir: Path,
    voicebank_dir: Path | None = None,
    use_cache: bool = True,
    cache_dir: Path | None = None,
) -> G2pResolver:
    """Assemble the dictionary chain for a language."""
    g2ps = [G2pDictionary.from_file(ensure_plugin_dictionary(language, plugins_dir))]

    if voicebank_dir is not None:
        override = Path(voicebank_dir) / language.dictionary_name
        if override.exists():
            try:
                g2ps.append(G2pDictionary.from_file(override))
            except (OSError, ValueError, yaml.YAMLError) as exc:
                logger.error(f"Failed to load {override}: {exc}")

    g2ps.append(ArpabetG2p(use_cache=use_cache, cache_dir=cache_dir))
    return G2pResolver(G2pFallbacks(g2ps), language.replacements)


__all__ = [
    "ArpabetG2p",
    "G2pDictionary",
    "G2pFallbacks",
    "G2pResolver",
    "build_g2p",
    "ensure_plugin_dictionary",
]
