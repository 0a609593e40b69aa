from typing import List, Tuple

SCORING_TITLE = "Scoring based on word length"

# (min_len, max_len, bonus, flat) rows; flat wins over length + bonus when set
LENGTH_SCORES: List[Tuple[int, int, int, int]] = [
    (2, 4, 0, 0),
    (5, 6, 1, 0),
    (7, 7, 3, 0),
    (8, 8, 0, 15),
]


def _row_for(length: int):
    for row in LENGTH_SCORES:
        if row[0] <= length <= row[1]:
            return row
    return None


def score_for(word: str) -> int:
    """Points for an accepted word, based only on its length.

    2-4 letters score their length, 5-6 letters length + 1, 7 letters
    length + 3 and 8 letters a flat 15. Anything else scores 0.
    """
    row = _row_for(len(word))
    if row is None:
        return 0
    _, _, bonus, flat = row
    if flat:
        return flat
    return len(word) + bonus


def scoring_legend() -> List[str]:
    # Built from LENGTH_SCORES so the text always matches score_for.
    lines: List[str] = []
    for lo, hi, bonus, flat in LENGTH_SCORES:
        span = f"{lo}" if lo == hi else f"{lo}-{hi}"
        if flat:
            lines.append(f"{span} letters: {flat} points")
        elif lo == hi:
            lines.append(f"{span} letters: {lo + bonus} points")
        elif bonus:
            lines.append(f"{span} letters: (length + {bonus}) points")
        else:
            lines.append(f"{span} letters: (length) points")
    return lines
