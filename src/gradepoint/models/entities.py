from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from gradepoint.core.gpa import calculate_gpa
from gradepoint.core.grades import is_letter_grade, to_grade_point

UNKNOWN_NAME = "Unknown"
DEFAULT_STUDENT_ID = "0000"
DEFAULT_CREDIT_HOURS = 3
MIN_CREDIT_HOURS = 1
MAX_CREDIT_HOURS = 6
DEFAULT_LETTER_GRADE = "F"


def _text_or_default(value: Optional[str], default: str) -> str:
    if value is None or value == "":
        return default
    return value


def _sanitize_credit_hours(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_CREDIT_HOURS
    if value < MIN_CREDIT_HOURS or value > MAX_CREDIT_HOURS:
        return DEFAULT_CREDIT_HOURS
    return value


@dataclass(frozen=True)
class Course:
    name: Optional[str]
    credit_hours: int
    letter_grade: Optional[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _text_or_default(self.name, UNKNOWN_NAME))
        object.__setattr__(self, "credit_hours", _sanitize_credit_hours(self.credit_hours))
        if not is_letter_grade(self.letter_grade):
            object.__setattr__(self, "letter_grade", DEFAULT_LETTER_GRADE)

    @property
    def grade_point(self) -> float:
        return to_grade_point(self.letter_grade)


@dataclass
class Student:
    id: Optional[str]
    name: Optional[str]
    _courses: List[Course] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.id = _text_or_default(self.id, DEFAULT_STUDENT_ID)
        self.name = _text_or_default(self.name, UNKNOWN_NAME)

    @property
    def courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    def enroll(self, course: Optional[Course]) -> None:
        if course is not None:
            self._courses.append(course)

    def calculate_gpa(self) -> float:
        if not self._courses:
            return 0.0
        return calculate_gpa(self._courses)
