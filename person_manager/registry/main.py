# registry/main.py
"""Головний модуль: будує демонстраційні записи і виводить їх у консоль."""
import logging
import sys
from datetime import date
from typing import Any, Dict, Iterable, Optional

from . import config, display, errors
from .builders import PersonBuilder, StudentBuilder
from .models import Person, Student
from .repositories import PersonRepository, Repository, StudentRepository

logger = logging.getLogger(__name__)


def build_person(data: Dict[str, Any]) -> Person:
    return (
        PersonBuilder()
        .set_name(data["name"])
        .set_surname(data["surname"])
        .set_patronymic(data["patronymic"])
        .set_birth_month(data["birth_month"])
        .set_birth_year(data["birth_year"])
        .build()
    )


def build_student(data: Dict[str, Any]) -> Student:
    return (
        StudentBuilder()
        .set_name(data["name"])
        .set_surname(data["surname"])
        .set_patronymic(data["patronymic"])
        .set_birth_month(data["birth_month"])
        .set_birth_year(data["birth_year"])
        .set_admission_year(data["admission_year"])
        .set_specialty(data["specialty"])
        .build()
    )


def fill_repository(repo: Repository, records: Iterable[Dict[str, Any]], build) -> None:
    """Додає записи по одному; помилковий запис пропускається, решта додаються."""
    for data in records:
        try:
            repo.add(build(data))
        except errors.PersonAppError as e:
            logger.error("Запис %s %s пропущено: %s", data.get("surname"), data.get("name"), e)
            print(f"\nПомилка: {e}")


def read_letter(prompt: str) -> str:
    """Зчитує рядок з консолі і повертає його перший символ ('' для порожнього вводу)."""
    return input(prompt)[:1]


def main_cli(today: Optional[date] = None) -> int:
    """Основний сценарій демонстрації. Завжди повертає 0."""
    today = today or date.today()
    print("=== СИСТЕМА ОБЛІКУ ЛЮДЕЙ ТА СТУДЕНТІВ ===\n")

    try:
        person_repo = PersonRepository()
        student_repo = StudentRepository()

        fill_repository(person_repo, config.SAMPLE_PEOPLE, build_person)
        fill_repository(student_repo, config.SAMPLE_STUDENTS, build_student)

        print(">>> СПИСОК ЛЮДЕЙ:")
        for person in person_repo.get_all():
            print()
            print(display.format_person(person, today))

        print("\n>>> СПИСОК СТУДЕНТІВ:")
        for student in student_repo.get_all():
            print()
            print(display.format_student(student, today))

        print("\n>>> ПІДРАХУНОК ЛІТЕР У ПРІЗВИЩАХ:")
        letter = read_letter("\nВведіть літеру для підрахунку в прізвищах: ")
        if not letter:
            print("⚠️ Літеру не введено, підрахунок пропущено.")
        else:
            print(f"\nЛітера '{letter}' в прізвищах людей:")
            print(display.format_letter_counts(person_repo, letter))
            print(f"\nЛітера '{letter}' в прізвищах студентів:")
            print(display.format_letter_counts(student_repo, letter))

        print("\n=== ЗАВЕРШЕННЯ РОБОТИ ПРОГРАМИ ===")

    except errors.PersonAppError as e:
        logger.error("Помилка застосунку: %s", e)
        print(f"\nПомилка: {e}")
    except (KeyboardInterrupt, EOFError):
        print("\nПрограму зупинено користувачем.")
    except Exception as e:
        logger.exception("Непередбачена помилка")
        print(f"\nНепередбачена помилка: {e}")

    return 0


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    return main_cli()


if __name__ == '__main__':
    sys.exit(main())
