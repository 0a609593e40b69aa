import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from wordscramble.dictionary import WordListDictionary
from wordscramble.engine import GameEngine, ResultKind, can_spell
from wordscramble.words import FixedRootWordSource

WORDS = {"worms", "worm", "silk", "milk", "work", "slow", "lull", "silkworm", "i"}


def _engine(root="silkworm", words=WORDS):
    engine = GameEngine(WordListDictionary(words), root_words=FixedRootWordSource(root))
    engine.start_new_round()
    return engine


def test_accepts_worms_for_six_points():
    engine = _engine()
    result = engine.submit("worms")
    assert result.kind is ResultKind.ACCEPTED
    assert result.points == 6
    assert engine.used_words == ("worms",)
    assert engine.round_score == 6
    assert engine.total_score == 6


def test_input_is_normalized_before_checks():
    engine = _engine()
    result = engine.submit("  SiLK \n")
    assert result.accepted
    assert result.word == "silk"
    assert engine.used_words == ("silk",)


def test_same_word_different_case_is_already_used():
    engine = _engine()
    assert engine.submit("worms").accepted
    second = engine.submit("Worms")
    assert second.kind is ResultKind.ALREADY_USED
    assert engine.used_words == ("worms",)
    assert engine.round_score == 6


def test_letter_multiplicity_is_enforced():
    # silkworm has a single 'l'
    engine = _engine()
    result = engine.submit("lull")
    assert result.kind is ResultKind.NOT_POSSIBLE
    assert engine.used_words == ()


def test_root_word_itself_is_rejected():
    engine = _engine()
    result = engine.submit("silkworm")
    assert result.kind is ResultKind.IS_ROOT_WORD
    assert engine.used_words == ()
    assert engine.round_score == 0
    assert engine.total_score == 0


def test_unknown_word_is_not_real():
    engine = _engine()
    result = engine.submit("mwor")
    assert result.kind is ResultKind.NOT_REAL
    assert engine.used_words == ()


def test_realness_is_checked_before_root_word():
    engine = _engine(words={"worms"})
    assert engine.submit("silkworm").kind is ResultKind.NOT_REAL


def test_possibility_is_checked_before_realness():
    engine = _engine()
    assert engine.submit("zzz").kind is ResultKind.NOT_POSSIBLE


def test_blank_input_is_ignored():
    engine = _engine()
    for raw in ["", "   ", "\t\n"]:
        result = engine.submit(raw)
        assert result.kind is ResultKind.IGNORED
        assert not result.accepted
    assert engine.used_words == ()
    assert engine.round_score == 0


def test_rejections_are_repeatable_and_do_not_mutate():
    engine = _engine()
    engine.submit("worm")
    before = engine.snapshot()
    for candidate in ["lull", "mwor", "silkworm", "worm"]:
        first = engine.submit(candidate)
        second = engine.submit(candidate)
        assert first.kind is second.kind
        assert not first.accepted
    assert engine.snapshot() == before


def test_single_letter_word_scores_nothing():
    engine = _engine()
    result = engine.submit("i")
    assert result.accepted
    assert result.points == 0


def test_accepted_words_fit_root_letters():
    engine = _engine()
    for w in ["worms", "silk", "milk", "work", "slow", "lull", "silkworm"]:
        engine.submit(w)
    assert engine.used_words == ("worms", "silk", "milk", "work", "slow")
    for w in engine.used_words:
        assert can_spell(w, engine.root_word)
        assert w != engine.root_word
    assert engine.round_score == 6 + 4 + 4 + 4 + 4


def test_recent_words_are_most_recent_first():
    engine = _engine()
    engine.submit("silk")
    engine.submit("milk")
    engine.submit("worm")
    assert engine.recent_words() == ["worm", "milk", "silk"]
    assert engine.snapshot().used_words == ("worm", "milk", "silk")


def test_can_spell_respects_counts():
    assert can_spell("pep", "pepper")
    assert can_spell("", "abc")
    assert not can_spell("aab", "abc")
    assert not can_spell("lull", "silkworm")
