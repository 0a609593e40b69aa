from pathlib import Path
from typing import Iterable, Optional, Protocol, Set

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "words.txt"


class DictionaryChecker(Protocol):
    def is_real_word(self, word: str, language: str = "en") -> bool:
        ...


def load_dictionary(path) -> Set[str]:
    with open(path, "r", encoding="utf-8-sig") as f:
        return {line.strip().lower() for line in f if line.strip() and line[0].isalpha()}


class WordListDictionary:
    """Set-backed dictionary for a single language.

    Lookups are case-insensitive. Words in any other language than the one
    the list was built for are never real.
    """

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language.lower()
        self._words: Set[str] = {w.strip().lower() for w in words if w and w.strip()}

    @classmethod
    def from_file(cls, path, language: str = "en") -> "WordListDictionary":
        return cls(load_dictionary(path), language=language)

    def is_real_word(self, word: str, language: str = "en") -> bool:
        if not word:
            return False
        if language.lower() != self.language:
            return False
        return word.strip().lower() in self._words

    def __contains__(self, word: str) -> bool:
        return self.is_real_word(word, self.language)

    def __len__(self) -> int:
        return len(self._words)


def load_default_dictionary(language: str = "en", path: Optional[str] = None) -> WordListDictionary:
    if path:
        return WordListDictionary.from_file(path, language=language)
    # The bundled list is English only
    if language.lower() != "en":
        raise ValueError(f"no bundled dictionary for language {language!r}; give a dictionary path")
    return WordListDictionary.from_file(DEFAULT_DICTIONARY_PATH, language="en")
