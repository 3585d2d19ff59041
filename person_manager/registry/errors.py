# registry/errors.py
"""Модуль для визначення власних винятків застосунку."""
from typing import Optional


class PersonAppError(Exception):
    """Базовий клас для всіх винятків у цьому застосунку."""
    pass


class ValidationError(PersonAppError, ValueError):
    """Виняток при некоректному значенні поля (у конструкторі або сетері білдера)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class IncompleteBuilderError(PersonAppError):
    """Виняток, коли обов'язкове поле не задане до виклику build()."""

    def __init__(self, field: str):
        super().__init__(f"Поле '{field}' не задане")
        self.field = field


class BuilderReuseError(PersonAppError):
    """Виняток при повторному використанні білдера після build()."""
    pass


class PreconditionError(PersonAppError, TypeError):
    """Виняток, коли до репозиторію передано відсутній або чужий об'єкт."""
    pass
