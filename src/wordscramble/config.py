import os


def parse_seed(value):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"WORDSCRAMBLE_SEED must be an integer, got {value!r}") from None


class Config:
    # Unset paths mean the word lists bundled with the package
    START_WORDS_PATH = os.environ.get('WORDSCRAMBLE_START_WORDS') or None
    DICTIONARY_PATH = os.environ.get('WORDSCRAMBLE_DICT') or None
    LANGUAGE = os.environ.get('WORDSCRAMBLE_LANGUAGE', 'en')
    FALLBACK_ROOT_WORD = os.environ.get('WORDSCRAMBLE_FALLBACK_ROOT_WORD', 'silkworm')
    # Kept as text; converted where it is used (argparse type=int, parse_seed)
    SEED = os.environ.get('WORDSCRAMBLE_SEED') or None
