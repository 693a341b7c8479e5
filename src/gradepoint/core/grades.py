from typing import Dict, List, Tuple

INVALID_GRADE = "Invalid"
LETTER_GRADES: Tuple[str, ...] = ("A", "B", "C", "D", "F")

GRADE_BANDS: List[Tuple[int, int, str]] = [
    (90, 100, "A"),
    (80, 89, "B"),
    (70, 79, "C"),
    (60, 69, "D"),
    (0, 59, "F"),
]

GRADE_POINTS: Dict[str, float] = {
    "A": 4.0,
    "B": 3.0,
    "C": 2.0,
    "D": 1.0,
    "F": 0.0,
}


def classify_score(score: int) -> str:
    """
    Map an integer score to a letter grade.
    Scores below 0 or above 100, and anything that is not an int, give "Invalid".
    """
    if isinstance(score, bool) or not isinstance(score, int):
        return INVALID_GRADE
    for low, high, letter in GRADE_BANDS:
        if low <= score <= high:
            return letter
    return INVALID_GRADE


def is_letter_grade(value: object) -> bool:
    return isinstance(value, str) and value in GRADE_POINTS


def to_grade_point(letter_grade: object) -> float:
    if not is_letter_grade(letter_grade):
        return 0.0
    return GRADE_POINTS[letter_grade]
