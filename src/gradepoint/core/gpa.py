from typing import Iterable, Protocol

MAX_GPA = 4.0


class WeightedGrade(Protocol):
    @property
    def grade_point(self) -> float: ...

    @property
    def credit_hours(self) -> int: ...


def calculate_gpa(courses: Iterable[WeightedGrade]) -> float:
    """
    GPA = Σ(grade_point * credit_hours) / Σ(credit_hours), capped at 4.0.
    Returns 0.0 when there is nothing to average. The result is not rounded.
    """
    total_points = 0.0
    total_credits = 0
    for course in courses:
        total_points += course.grade_point * course.credit_hours
        total_credits += course.credit_hours

    if total_credits == 0:
        return 0.0

    gpa = total_points / total_credits
    if gpa > MAX_GPA:
        return MAX_GPA
    return gpa
