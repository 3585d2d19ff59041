# registry/display.py
"""Форматування записів для виводу в консоль."""
from datetime import date
from typing import Iterable

from .models import Person, Student


def format_person(person: Person, as_of: date) -> str:
    return (
        f"{person.display_info()}\n"
        f"Повний вік (станом на {as_of:%d.%m.%Y}): {person.age(as_of)} років"
    )


def format_student(student: Student, as_of: date) -> str:
    return (
        f"{student.display_info()}\n"
        f"Повний вік: {student.age(as_of)} років\n"
        f"Років з моменту вступу: {student.years_since_admission(as_of)} років"
    )


def format_letter_counts(entities: Iterable[Person], letter: str) -> str:
    """Рядок "<прізвище>: <кількість> разів" для кожного запису."""
    return "\n".join(
        f"{entity.surname}: {entity.count_letter_in_surname(letter)} разів" for entity in entities
    )
