# tests/conftest.py
import pytest
from registry.models import Person, Student
from registry.repositories import PersonRepository, StudentRepository


@pytest.fixture
def ivan() -> Person:
    """Фікстура: людина з прикладу демонстрації."""
    return Person("Іван", "Петренко", "Олександрович", 3, 1985)


@pytest.fixture
def oleh() -> Student:
    return Student("Олег", "Шевченко", "Іванович", 9, 2003, 2021, "Комп'ютерні науки")


@pytest.fixture
def person_repo() -> PersonRepository:
    repo = PersonRepository()
    repo.add(Person("Іван", "Петренко", "Олександрович", 3, 1985))
    repo.add(Person("Марія", "Коваленко", "Василівна", 7, 1990))
    repo.add(Person("іВАН", "Коваленко", "Петрович", 1, 2000))
    return repo


@pytest.fixture
def student_repo() -> StudentRepository:
    repo = StudentRepository()
    repo.add(Student("Олег", "Шевченко", "Іванович", 9, 2003, 2021, "Комп'ютерні науки"))
    repo.add(Student("Анна", "Мельник", "Петрівна", 12, 2004, 2022, "Програмна інженерія"))
    repo.add(Student("Ольга", "Бондар", "Іванівна", 5, 2002, 2020, "комп'ютерні НАУКИ"))
    return repo
