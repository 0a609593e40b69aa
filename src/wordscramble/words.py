import random
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_START_WORDS_PATH = DATA_DIR / "start.txt"


class RootWordSource(Protocol):
    def next_root_word(self) -> Optional[str]:
        ...


def load_word_list(path) -> List[str]:
    # One candidate per line; blank lines (including a trailing newline) are dropped.
    with open(path, "r", encoding="utf-8-sig") as f:
        return [line.strip().lower() for line in f if line.strip()]


class WordListRootWordSource:
    def __init__(self, words: Sequence[str], rng: Optional[random.Random] = None):
        self.words = list(words)
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path, rng: Optional[random.Random] = None) -> "WordListRootWordSource":
        return cls(load_word_list(path), rng=rng)

    def next_root_word(self) -> Optional[str]:
        if not self.words:
            return None
        return self.rng.choice(self.words)


class FixedRootWordSource:
    def __init__(self, word: Optional[str]):
        self.word = word

    def next_root_word(self) -> Optional[str]:
        return self.word


def load_default_root_words(rng: Optional[random.Random] = None) -> WordListRootWordSource:
    return WordListRootWordSource.from_file(DEFAULT_START_WORDS_PATH, rng=rng)
