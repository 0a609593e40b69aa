from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .dictionary import DictionaryChecker
from .scoring import score_for
from .words import RootWordSource

DEFAULT_ROOT_WORD = "silkworm"


class RootWordUnavailable(RuntimeError):
    """Neither the root word source nor the fallback produced a word."""


class ResultKind(Enum):
    IGNORED = "ignored"
    ACCEPTED = "accepted"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"
    IS_ROOT_WORD = "is_root_word"


@dataclass(frozen=True)
class SubmissionResult:
    kind: ResultKind
    word: str
    points: int = 0

    @property
    def accepted(self) -> bool:
        return self.kind is ResultKind.ACCEPTED


@dataclass(frozen=True)
class GameSnapshot:
    root_word: str
    # most recent first
    used_words: Tuple[str, ...]
    round_score: int
    total_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rootWord": self.root_word,
            "usedWords": list(self.used_words),
            "roundScore": self.round_score,
            "totalScore": self.total_score,
        }


Listener = Callable[[GameSnapshot], None]


def normalize(text: str) -> str:
    return text.strip().lower()


def can_spell(word: str, letters: Iterable[str]) -> bool:
    # Each letter of the word consumes one matching letter from the pool.
    available = Counter(letters)
    for ch in word:
        if available[ch] > 0:
            available[ch] -= 1
        else:
            return False
    return True


class GameEngine:
    """Round state and the submission rules of the word game.

    The engine owns the current root word, the words accepted during the
    round and the round/total scores. Dictionary lookups and root word
    selection are delegated to the injected collaborators, so the engine
    itself does no I/O. It is not thread-safe; callers sharing an engine
    must serialize access to it.
    """

    def __init__(
        self,
        dictionary: DictionaryChecker,
        root_words: Optional[RootWordSource] = None,
        language: str = "en",
        fallback_root_word: str = DEFAULT_ROOT_WORD,
    ):
        self.dictionary = dictionary
        self.root_words = root_words
        self.language = language
        self.fallback_root_word = fallback_root_word
        self._root_word = ""
        self._used_words: List[str] = []
        self._round_score = 0
        self._total_score = 0
        self._listeners: List[Listener] = []

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def round_score(self) -> int:
        return self._round_score

    @property
    def total_score(self) -> int:
        return self._total_score

    def recent_words(self) -> List[str]:
        return list(reversed(self._used_words))

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            root_word=self._root_word,
            used_words=tuple(reversed(self._used_words)),
            round_score=self._round_score,
            total_score=self._total_score,
        )

    def add_listener(self, listener: Listener) -> None:
        """Register a callback that receives a snapshot after each committed change.

        Listeners run after the change is applied. An exception raised by a
        listener propagates to the caller of ``submit`` or ``start_new_round``
        but the change stays committed, and later listeners are not called.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    def _choose_root_word(self) -> str:
        word = None
        if self.root_words is not None:
            word = self.root_words.next_root_word()
        if word:
            word = normalize(word)
        if not word:
            word = normalize(self.fallback_root_word or "")
        if not word:
            raise RootWordUnavailable("No root word available and no fallback configured")
        return word

    def start_new_round(self) -> None:
        # Pick first so a failure leaves the previous round intact.
        root = self._choose_root_word()
        self._root_word = root
        self._used_words = []
        self._round_score = 0
        self._notify()

    def is_original(self, word: str) -> bool:
        return word not in self._used_words

    def is_possible(self, word: str) -> bool:
        return can_spell(word, self._root_word)

    def is_real(self, word: str) -> bool:
        return bool(self.dictionary.is_real_word(word, self.language))

    def is_root_word(self, word: str) -> bool:
        return word == self._root_word

    def submit(self, candidate: str) -> SubmissionResult:
        word = normalize(candidate)
        if not word:
            return SubmissionResult(ResultKind.IGNORED, word)
        if not self.is_original(word):
            return SubmissionResult(ResultKind.ALREADY_USED, word)
        if not self.is_possible(word):
            return SubmissionResult(ResultKind.NOT_POSSIBLE, word)
        if not self.is_real(word):
            return SubmissionResult(ResultKind.NOT_REAL, word)
        if self.is_root_word(word):
            return SubmissionResult(ResultKind.IS_ROOT_WORD, word)

        points = score_for(word)
        self._used_words.append(word)
        self._round_score += points
        self._total_score += points
        self._notify()
        return SubmissionResult(ResultKind.ACCEPTED, word, points)
