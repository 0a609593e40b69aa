from typing import Dict, Optional, Tuple

from .engine import ResultKind, SubmissionResult

REJECTION_TEXT: Dict[ResultKind, Tuple[str, str]] = {
    ResultKind.ALREADY_USED: ("Word used already", "Be more original!"),
    ResultKind.NOT_POSSIBLE: ("Word not possible", "Use ONLY the letters from the word up top."),
    ResultKind.NOT_REAL: ("Word not recognised", "Yeah, that's not a real word."),
    ResultKind.IS_ROOT_WORD: ("Cheeky!", "You can't just use the original word!"),
}


def describe(result: SubmissionResult) -> Optional[Tuple[str, str]]:
    """Title and message to show for a rejected word, None otherwise."""
    return REJECTION_TEXT.get(result.kind)
