"""CLI entrypoint for deltaphon: subcommand dispatcher."""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from deltaphon.types import ConfigurationError, Note


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between subcommands."""
    parser.add_argument("--language", default=None,
                        help="Phonemizer tag (default: $DELTAPHON_LANGUAGE or 'EN DELTA')")
    parser.add_argument("--voicebank-dir", type=Path, default=None,
                        help="Voicebank folder holding an override xsampa.yaml")
    parser.add_argument("--no-cache", action="store_true", default=False,
                        help="Disable file-based caching of G2P predictions")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Debug logging")


def _add_phonemize_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "words", nargs="*", default=[],
        help="Lyrics, one word per note (ignored with --midi)",
    )
    parser.add_argument("--tones", type=int, nargs="+", default=None,
                        help="MIDI tone per word (default: 60 for every word)")
    parser.add_argument("--note-length", type=float, default=500.0,
                        help="Length of each word's note in ms (default: 500)")
    parser.add_argument("--midi", type=Path, default=None,
                        help="MIDI file with notes and lyric events")
    parser.add_argument("--catalog", type=Path, required=True,
                        help="YAML list of the voicebank's aliases")
    parser.add_argument("--transition-ms", type=float, default=None,
                        help="Base transition length in ms (default: $DELTAPHON_TRANSITION_MS or 100)")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write JSON here instead of stdout")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="deltaphon",
        description="Map sung lyrics to the alias units a voicebank was recorded with",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    phonemize_parser = subparsers.add_parser(
        "phonemize",
        help="Phonemize notes into voicebank aliases",
        description="Phonemize lyrics into the aliases of a voicebank catalog",
    )
    _add_shared_args(phonemize_parser)
    _add_phonemize_args(phonemize_parser)

    g2p_parser = subparsers.add_parser(
        "g2p",
        help="Show the symbols the dictionaries give for words",
        description="Resolve words through the dictionary chain",
    )
    _add_shared_args(g2p_parser)
    g2p_parser.add_argument("words", nargs="+", help="Words to look up")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _settings(args: argparse.Namespace):
    from deltaphon.config import load_settings

    settings = load_settings()
    overrides = {}
    if args.language:
        overrides["language"] = args.language
    if getattr(args, "transition_ms", None) is not None:
        overrides["transition_ms"] = args.transition_ms
    return dataclasses.replace(settings, **overrides)


def _notes_from_words(words: list[str], tones: list[int] | None, length: float) -> list[Note]:
    if tones is None:
        tones = [60] * len(words)
    if len(tones) != len(words):
        print(f"Error: got {len(tones)} tones for {len(words)} words", file=sys.stderr)
        sys.exit(1)
    return [
        Note(lyric=word, tone=tone, position=i * length, duration=length)
        for i, (word, tone) in enumerate(zip(words, tones))
    ]


def _run_phonemize(args: argparse.Namespace) -> None:
    """Run the phonemize pipeline."""
    from deltaphon.alias.catalog import VoicebankCatalog
    from deltaphon.phonemize import Phonemizer
    from deltaphon.phonemize.midi_parser import parse_midi

    logger = logging.getLogger("deltaphon.phonemize")

    if not args.catalog.exists():
        print(f"Error: file not found: {args.catalog}", file=sys.stderr)
        sys.exit(1)

    if args.midi is not None:
        if not args.midi.exists():
            print(f"Error: file not found: {args.midi}", file=sys.stderr)
            sys.exit(1)
        track = parse_midi(args.midi)
        notes = track.notes
        logger.info(f"Melody: {len(notes)} notes, {track.tempo} BPM, {track.total_duration:.1f}s")
    elif args.words:
        notes = _notes_from_words(args.words, args.tones, args.note_length)
    else:
        print("Error: give lyrics or --midi", file=sys.stderr)
        sys.exit(1)

    catalog = VoicebankCatalog.from_yaml(args.catalog)
    logger.info(f"Catalog: {len(catalog)} aliases")

    phonemizer = Phonemizer.from_settings(
        catalog,
        settings=_settings(args),
        voicebank_dir=args.voicebank_dir,
        use_cache=not args.no_cache,
    )
    results = phonemizer.phonemize(notes)

    payload = json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2)
    if args.output is not None:
        args.output.write_text(payload + "\n", encoding="utf8")
        logger.info(f"Output: {args.output}")
    else:
        print(payload)


def _run_g2p(args: argparse.Namespace) -> None:
    """Print the resolved symbols of each word."""
    from deltaphon.language import get_language

    settings = _settings(args)
    language = get_language(settings.language)
    g2p = language.dictionary(
        settings.plugins_dir,
        voicebank_dir=args.voicebank_dir,
        use_cache=not args.no_cache,
        cache_dir=settings.cache_dir,
    )
    for word in args.words:
        symbols = g2p.resolve(word)
        print(f"{word}\t{' '.join(symbols) if symbols else '?'}")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "phonemize":
            _run_phonemize(args)
        elif args.command == "g2p":
            _run_g2p(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
