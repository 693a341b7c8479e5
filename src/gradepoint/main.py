import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional, Tuple

from gradepoint.config.settings import Settings, settings
from gradepoint.models.entities import Course, Student
from gradepoint.services.classifier_driver import format_report, run_driver
from gradepoint.services.environment import describe_environment
from gradepoint.services.process_runner import (
    ExecutableNotFoundError,
    ProcessRunnerError,
    copy_artifacts,
    resolve_test_target,
    run_with_fallbacks,
)

logger = logging.getLogger(__name__)

MENU_LINE = "-" * 40

MENU_ITEMS: Tuple[Tuple[int, str], ...] = (
    (0, "Exit"),
    (1, "Run grade classifier driver"),
    (2, "Run all tests"),
    (3, "Run Student tests"),
    (4, "Run Course tests"),
    (5, "Run classifier tests"),
    (6, "Run coverage and copy report to artifacts"),
    (7, "Show sample GPA calculation"),
    (8, "Open GPA calculator"),
)


class MenuRunner:
    def __init__(
        self,
        config: Settings = settings,
        read_line: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.read_line = read_line
        self.echo = echo
        self.actions: Dict[int, Callable[[], None]] = {
            1: self.run_classifier_driver,
            2: lambda: self.run_tests(),
            3: lambda: self.run_tests("student"),
            4: lambda: self.run_tests("course"),
            5: lambda: self.run_tests("classifier"),
            6: self.run_coverage,
            7: self.show_sample_gpa,
            8: self.open_gpa_calculator,
        }

    def print_banner(self) -> None:
        self.echo("=" * 40)
        self.echo("Python Version Check")
        self.echo("=" * 40)
        for line in describe_environment(self.config.min_python):
            self.echo(line)
        self.echo("")

    def print_menu(self) -> None:
        self.echo(MENU_LINE)
        self.echo("Project Runner - choose an action:")
        for number, label in MENU_ITEMS:
            self.echo(f"{number}) {label}")
        self.echo(MENU_LINE)

    def _prompt(self, message: str) -> Optional[str]:
        try:
            return self.read_line(message)
        except EOFError:
            return None

    def _selections(self) -> Iterator[int]:
        while True:
            self.print_menu()
            raw = self._prompt("Enter selection: ")
            if raw is None:
                self.echo("No input available; exiting.")
                return
            raw = raw.strip()
            if not raw:
                continue
            try:
                yield int(raw)
            except ValueError:
                self.echo("Invalid option. Please enter a number.")

    def run(self) -> None:
        self.print_banner()
        for choice in self._selections():
            if choice == 0:
                self.echo("Exiting.")
                return
            action = self.actions.get(choice)
            if action is None:
                self.echo(f"Unknown selection: {choice}")
                continue
            try:
                action()
            except ExecutableNotFoundError as exc:
                self.echo(str(exc))
                self.echo("Install pytest (pip install -e .[test]) or set GRADEPOINT_TEST_RUNNERS.")
            except ProcessRunnerError as exc:
                logger.exception("Menu action %d failed", choice)
                self.echo(f"Error: {exc}")
            self.echo("")
            if self._prompt("Press Enter to continue...") is None:
                self.echo("")
                return

    def run_classifier_driver(self) -> None:
        self.echo("Running grade classifier driver...")
        self.echo(format_report(run_driver()))

    def run_tests(self, target: Optional[str] = None) -> int:
        args = [resolve_test_target(target)] if target else []
        self.echo(f"Running tests: {' '.join(args) or 'all'}")
        result = run_with_fallbacks(
            self.config.test_runners, args, cwd=self.config.project_dir, echo=self.echo
        )
        self.echo(f"Test runner exit code: {result.exit_code}")
        return result.exit_code

    def run_coverage(self) -> Path:
        project_dir = Path(self.config.project_dir)
        report_dir = project_dir / self.config.coverage_dir
        args = ["--cov=gradepoint", f"--cov-report=html:{report_dir}"]
        self.echo("Running tests with coverage...")
        result = run_with_fallbacks(
            self.config.test_runners, args, cwd=self.config.project_dir, echo=self.echo
        )
        self.echo(f"Test runner exit code: {result.exit_code}")
        destination = copy_artifacts(report_dir, project_dir / self.config.artifacts_dir)
        self.echo(f"Copied coverage report to: {destination.resolve()}")
        return destination

    def show_sample_gpa(self) -> float:
        student = Student("1001", "Sample Student")
        student.enroll(Course("Math", 3, "A"))
        student.enroll(Course("English", 4, "B"))
        student.enroll(Course("Science", 2, "F"))
        self.echo(f"Student: {student.name} ({student.id})")
        for course in student.courses:
            self.echo(f"  {course.name:<10} {course.letter_grade}  {course.credit_hours} credits  {course.grade_point:.1f} points")
        gpa = student.calculate_gpa()
        self.echo(f"GPA: {gpa:.4f}")
        return gpa

    def open_gpa_calculator(self) -> None:
        from gradepoint.ui.gpa_view import launch

        launch()


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    MenuRunner().run()


if __name__ == "__main__":
    main()
