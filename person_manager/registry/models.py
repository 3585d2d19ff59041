# registry/models.py
"""Модуль, що визначає основні моделі даних: Person і Student."""
from datetime import date
from typing import List, Tuple

from .config import MIN_BIRTH_YEAR
from .errors import ValidationError

# Назви полів для повідомлень і виводу
FIELD_LABELS = {
    "name": "Ім'я",
    "surname": "Прізвище",
    "patronymic": "По-батькові",
    "birth_month": "Місяць народження",
    "birth_year": "Рік народження",
    "admission_year": "Рік вступу до ВУЗу",
    "specialty": "Спеціальність",
}


def current_year() -> int:
    return date.today().year


def _require_int(value, field: str) -> int:
    # bool є підкласом int, але роком чи місяцем бути не може
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{FIELD_LABELS[field]} має бути цілим числом", field)
    return value


def validate_text(value, field: str) -> str:
    """Перевіряє, що текстове поле не порожнє і не складається лише з пробілів."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Поле '{FIELD_LABELS[field]}' не може бути порожнім", field)
    return value


def validate_month(month) -> int:
    _require_int(month, "birth_month")
    if month < 1 or month > 12:
        raise ValidationError("Місяць має бути від 1 до 12", "birth_month")
    return month


def validate_birth_year(year) -> int:
    _require_int(year, "birth_year")
    if year < MIN_BIRTH_YEAR or year > current_year():
        raise ValidationError(
            f"Рік народження некоректний: {year} (допустимо {MIN_BIRTH_YEAR}..{current_year()})",
            "birth_year",
        )
    return year


def validate_admission_year(year) -> int:
    """Перевіряє лише те, що рік вступу не в майбутньому.

    Порівняння з роком народження робить конструктор Student,
    бо для нього потрібні обидва поля.
    """
    _require_int(year, "admission_year")
    if year > current_year():
        raise ValidationError("Рік вступу не може бути в майбутньому", "admission_year")
    return year


class Person:
    """Представляє людину з ПІБ та місяцем і роком народження."""

    FIELDS = ("name", "surname", "patronymic", "birth_month", "birth_year")

    def __init__(self, name: str, surname: str, patronymic: str, birth_month: int, birth_year: int):
        self.name = validate_text(name, "name")
        self.surname = validate_text(surname, "surname")
        self.patronymic = validate_text(patronymic, "patronymic")
        self.birth_month = validate_month(birth_month)
        self.birth_year = validate_birth_year(birth_year)

    def age(self, as_of: date) -> int:
        """Повний вік станом на дату as_of.

        Враховується лише місяць народження: якщо він ще не настав
        у році as_of, віднімається один рік. День місяця не враховується.
        """
        years = as_of.year - self.birth_year
        if as_of.month < self.birth_month:
            years -= 1
        return years

    def count_letter_in_surname(self, letter: str) -> int:
        """Рахує входження літери у прізвищі без урахування регістру."""
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValidationError("Потрібно передати рівно один символ", "letter")
        if not self.surname:
            return 0
        target = letter.casefold()
        return sum(1 for ch in self.surname if ch.casefold() == target)

    def info_fields(self) -> List[Tuple[str, object]]:
        return [(FIELD_LABELS[f], getattr(self, f)) for f in self.FIELDS]

    def display_info(self) -> str:
        return "\n".join(f"{label}: {value}" for label, value in self.info_fields())

    def _values(self) -> tuple:
        return tuple(getattr(self, f) for f in self.FIELDS)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._values())

    def __repr__(self) -> str:
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self.FIELDS)
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return f"{self.surname} {self.name} {self.patronymic}"


class Student(Person):
    """Студент: усі поля Person плюс рік вступу та спеціальність."""

    FIELDS = Person.FIELDS + ("admission_year", "specialty")

    def __init__(self, name: str, surname: str, patronymic: str, birth_month: int, birth_year: int,
                 admission_year: int, specialty: str):
        super().__init__(name, surname, patronymic, birth_month, birth_year)

        _require_int(admission_year, "admission_year")
        if admission_year < self.birth_year:
            raise ValidationError("Рік вступу не може бути раніше року народження", "admission_year")
        self.admission_year = validate_admission_year(admission_year)
        self.specialty = validate_text(specialty, "specialty")

    def years_since_admission(self, as_of: date) -> int:
        """Кількість років від вступу (лише за роком, без урахування місяця)."""
        return as_of.year - self.admission_year
