"""Black-box driver for ``classify_score``.

Checks the classifier with equivalence partitioning (one class per grade band
plus the two invalid ranges) and boundary value analysis (each transition
point). Results are collected in a ``DriverReport`` that the caller owns, so
several runs never share tallies.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from gradepoint.core.grades import INVALID_GRADE, classify_score

logger = logging.getLogger(__name__)

Classifier = Callable[[int], str]

EQUIVALENCE_SECTION = "EQUIVALENCE PARTITIONING"
BOUNDARY_SECTION = "BOUNDARY VALUE ANALYSIS"

# (label, scores, expected)
EQUIVALENCE_CLASSES: List[Tuple[str, Tuple[int, ...], str]] = [
    ("EC1: Grade A [90-100]", (90, 95, 100), "A"),
    ("EC2: Grade B [80-89]", (80, 85, 89), "B"),
    ("EC3: Grade C [70-79]", (70, 75, 79), "C"),
    ("EC4: Grade D [60-69]", (60, 65, 69), "D"),
    ("EC5: Grade F [0-59]", (0, 30, 59), "F"),
    ("EC6: Invalid Score (< 0)", (-1, -50, -100), INVALID_GRADE),
    ("EC7: Invalid Score (> 100)", (101, 150, 200), INVALID_GRADE),
]

# (label, score, expected)
BOUNDARY_VALUES: List[Tuple[str, int, str]] = [
    ("BVA1: Lower Boundary of Valid Range", 0, "F"),
    ("BVA2: Just Below Valid Range", -1, INVALID_GRADE),
    ("BVA3: Boundary between F and D", 59, "F"),
    ("BVA3: Boundary between F and D", 60, "D"),
    ("BVA4: Boundary between D and C", 69, "D"),
    ("BVA4: Boundary between D and C", 70, "C"),
    ("BVA5: Boundary between C and B", 79, "C"),
    ("BVA5: Boundary between C and B", 80, "B"),
    ("BVA6: Boundary between B and A", 89, "B"),
    ("BVA6: Boundary between B and A", 90, "A"),
    ("BVA7: Upper Boundary of Valid Range", 100, "A"),
    ("BVA8: Just Above Valid Range", 101, INVALID_GRADE),
]

SEPARATOR_WIDTH = 80


@dataclass(frozen=True)
class CheckResult:
    section: str
    label: str
    score: int
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


@dataclass
class DriverReport:
    results: List[CheckResult] = field(default_factory=list)

    def record(self, result: CheckResult) -> CheckResult:
        self.results.append(result)
        if not result.passed:
            logger.debug("Check failed: %s score=%s expected=%s got=%s",
                         result.label, result.score, result.expected, result.actual)
        return result

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.passed * 100.0 / self.total

    def fail_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.failed * 100.0 / self.total

    def section(self, name: str) -> List[CheckResult]:
        return [r for r in self.results if r.section == name]


def check_score(
    report: DriverReport,
    classify: Classifier,
    section: str,
    label: str,
    score: int,
    expected: str,
) -> CheckResult:
    return report.record(CheckResult(section, label, score, expected, classify(score)))


def run_equivalence_partitioning(report: DriverReport, classify: Classifier = classify_score) -> None:
    for label, scores, expected in EQUIVALENCE_CLASSES:
        for score in scores:
            check_score(report, classify, EQUIVALENCE_SECTION, label, score, expected)


def run_boundary_value_analysis(report: DriverReport, classify: Classifier = classify_score) -> None:
    for label, score, expected in BOUNDARY_VALUES:
        check_score(report, classify, BOUNDARY_SECTION, label, score, expected)


def run_driver(classify: Classifier = classify_score) -> DriverReport:
    report = DriverReport()
    run_equivalence_partitioning(report, classify)
    run_boundary_value_analysis(report, classify)
    logger.info("Classifier driver finished: %d/%d passed", report.passed, report.total)
    return report


def _separator(char: str) -> str:
    return char * SEPARATOR_WIDTH


def _format_section(title: str, results: Sequence[CheckResult]) -> List[str]:
    lines = [_separator("="), title, _separator("=")]
    current_label = None
    for result in results:
        if result.label != current_label:
            current_label = result.label
            lines.append(result.label)
        status = "PASS" if result.passed else "FAIL"
        lines.append(
            f"  {status}: Score = {result.score} | Expected: {result.expected} | Got: {result.actual}"
        )
    lines.append("")
    return lines


def format_report(report: DriverReport) -> str:
    lines = [
        _separator("="),
        "Grade Classifier - Black Box Testing Driver",
        "Testing: classify_score(score)",
        _separator("="),
        "",
    ]
    lines += _format_section(f"1. {EQUIVALENCE_SECTION} TESTING", report.section(EQUIVALENCE_SECTION))
    lines += _format_section(f"2. {BOUNDARY_SECTION} TESTING", report.section(BOUNDARY_SECTION))

    lines += [
        _separator("="),
        "TEST SUMMARY",
        _separator("="),
        f"Total Tests Run:  {report.total}",
        f"Tests Passed:     {report.passed} ({report.pass_rate():.1f}%)",
        f"Tests Failed:     {report.failed} ({report.fail_rate():.1f}%)",
        _separator("="),
    ]
    if report.all_passed:
        lines.append("All tests passed! classify_score is working correctly.")
    else:
        lines.append("Some tests failed. Please review the implementation.")
    lines.append(_separator("="))
    return "\n".join(lines)
