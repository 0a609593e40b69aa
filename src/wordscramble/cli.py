import argparse
import random
import sys
from typing import Optional

from .config import Config
from .dictionary import load_default_dictionary
from .engine import GameEngine, RootWordUnavailable
from .messages import describe
from .scoring import SCORING_TITLE, scoring_legend
from .words import FixedRootWordSource, WordListRootWordSource, load_default_root_words

HELP_TEXT = "Type a word to submit it. Commands: :new (new word), :score (scoring), :words (your words), :quit"


def _build_engine(args, p: argparse.ArgumentParser) -> GameEngine:
    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        dictionary = load_default_dictionary(language=args.lang, path=args.dict_path)
        if args.root_word:
            source = FixedRootWordSource(args.root_word)
        elif args.start_words:
            source = WordListRootWordSource.from_file(args.start_words, rng=rng)
        else:
            source = load_default_root_words(rng=rng)
    except FileNotFoundError as exc:
        p.error(f"word list not found: {exc.filename}")
    except ValueError as exc:
        p.error(str(exc))
    roots = len(source.words) if isinstance(source, WordListRootWordSource) else 1
    print(f"[config] words={len(dictionary)} roots={roots} lang={args.lang}")
    return GameEngine(
        dictionary,
        root_words=source,
        language=args.lang,
        fallback_root_word=args.fallback_root_word,
    )


def _print_round(engine: GameEngine) -> None:
    print(f"Root word: {engine.root_word.upper()}")


def _print_scores(engine: GameEngine) -> None:
    print(f"This word: {engine.round_score}  Total: {engine.total_score}")


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Word Scramble: make words from the letters of a root word")
    p.add_argument("--start-words", type=str, default=Config.START_WORDS_PATH, help="Path to root word list (one word per line)")
    p.add_argument("--dict", type=str, dest="dict_path", default=Config.DICTIONARY_PATH, help="Path to dictionary file (one word per line)")
    p.add_argument("--lang", type=str, default=Config.LANGUAGE, help="Dictionary language")
    p.add_argument("--seed", type=int, default=Config.SEED, help="Random seed for root word selection")
    p.add_argument("--root-word", type=str, help="Always play this root word")
    p.add_argument("--fallback-root-word", type=str, default=Config.FALLBACK_ROOT_WORD, help=argparse.SUPPRESS)

    args = p.parse_args(argv)
    engine = _build_engine(args, p)

    try:
        engine.start_new_round()
    except RootWordUnavailable as exc:
        p.error(str(exc))
    print(f"[round] root={engine.root_word}")
    print(HELP_TEXT)
    _print_round(engine)

    for raw_line in sys.stdin:
        line = raw_line.strip()
        if line == ":quit":
            break
        if line == ":new":
            engine.start_new_round()
            print(f"[round] root={engine.root_word}")
            _print_round(engine)
            _print_scores(engine)
            continue
        if line == ":score":
            print(SCORING_TITLE)
            print("\n".join(scoring_legend()))
            continue
        if line == ":words":
            recent = engine.recent_words()
            print("\n".join(f"{w} ({len(w)})" for w in recent) if recent else "No words yet.")
            continue

        result = engine.submit(line)
        print(f"[submit] word={result.word} result={result.kind.value} points={result.points}")
        if result.accepted:
            print(f"+{result.points} points")
            _print_scores(engine)
            continue
        text = describe(result)
        if text:
            title, message = text
            print(f"{title}: {message}")

    print(f"Final total: {engine.total_score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
