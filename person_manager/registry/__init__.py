"""Облік людей і студентів: моделі, білдери та сховища в пам'яті."""
from .builders import PersonBuilder, StudentBuilder
from .errors import (
    BuilderReuseError,
    IncompleteBuilderError,
    PersonAppError,
    PreconditionError,
    ValidationError,
)
from .models import Person, Student
from .repositories import PersonRepository, StudentRepository

__all__ = [
    "Person",
    "Student",
    "PersonBuilder",
    "StudentBuilder",
    "PersonRepository",
    "StudentRepository",
    "PersonAppError",
    "ValidationError",
    "IncompleteBuilderError",
    "BuilderReuseError",
    "PreconditionError",
]
