from typing import Optional

import flet as ft

from gradepoint.config.settings import settings
from gradepoint.core.grades import LETTER_GRADES
from gradepoint.models.entities import Course, Student


def _parse_credit_hours(value: Optional[str]) -> object:
    # Course falls back to the default credit hours for anything non-numeric.
    try:
        return int((value or "").strip())
    except ValueError:
        return value


def build_gpa_view(page: ft.Page) -> ft.Column:
    student_id = ft.TextField(label="Student ID", width=200)
    student_name = ft.TextField(label="Student name", width=300)
    course_name = ft.TextField(label="Course", width=260)
    credit_hours = ft.TextField(label="Credit hours (1-6)", width=160, value="3")
    letter_grade = ft.Dropdown(
        width=120,
        label="Grade",
        value="A",
        options=[ft.dropdown.Option(letter) for letter in LETTER_GRADES],
    )

    header = ft.Text(weight=ft.FontWeight.BOLD)
    gpa_text = ft.Text(size=20)
    courses_list = ft.Column(spacing=6)

    state = {"student": Student(None, None)}

    def refresh() -> None:
        student: Student = state["student"]
        header.value = f"{student.name} ({student.id})"
        gpa_text.value = f"GPA: {student.calculate_gpa():.2f}"
        courses_list.controls.clear()
        if not student.courses:
            courses_list.controls.append(ft.Text("No courses enrolled yet."))
        for course in student.courses:
            courses_list.controls.append(
                ft.Text(
                    f"{course.name}: {course.letter_grade} "
                    f"({course.grade_point:.1f} x {course.credit_hours} credits)"
                )
            )
        page.update()

    def handle_student_change(_: ft.ControlEvent) -> None:
        # Renaming starts a fresh Student; enrolled courses are carried over.
        previous: Student = state["student"]
        student = Student(student_id.value, student_name.value)
        for course in previous.courses:
            student.enroll(course)
        state["student"] = student
        refresh()

    def handle_add(_: ft.ControlEvent) -> None:
        course = Course(course_name.value, _parse_credit_hours(credit_hours.value), letter_grade.value)
        state["student"].enroll(course)
        course_name.value = ""
        refresh()

    def handle_reset(_: ft.ControlEvent) -> None:
        state["student"] = Student(student_id.value, student_name.value)
        refresh()

    student_id.on_change = handle_student_change
    student_name.on_change = handle_student_change

    refresh()
    return ft.Column(
        [
            ft.Text("GPA Calculator", size=28, weight=ft.FontWeight.BOLD),
            ft.Row([student_id, student_name]),
            ft.Row([course_name, credit_hours, letter_grade]),
            ft.Row(
                [
                    ft.ElevatedButton("Add course", on_click=handle_add),
                    ft.OutlinedButton("Reset", on_click=handle_reset),
                ]
            ),
            header,
            gpa_text,
            courses_list,
        ],
        spacing=12,
    )


def main(page: ft.Page) -> None:
    page.title = "GradePoint"
    page.scroll = ft.ScrollMode.AUTO
    page.add(build_gpa_view(page))


def launch() -> None:
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )
