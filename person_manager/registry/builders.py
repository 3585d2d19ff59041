# registry/builders.py
"""Білдери для покрокового створення Person і Student."""
import logging
from typing import Any, Dict

from .errors import BuilderReuseError, IncompleteBuilderError
from .models import Person, Student, validate_admission_year, validate_birth_year, validate_month

logger = logging.getLogger(__name__)


class PersonBuilder:
    """Збирає поля людини і створює Person через build().

    Сетери повертають сам білдер, тож виклики можна ланцюжити.
    Місяць і рік перевіряються одразу в сетері, решта правил у конструкторі.
    Білдер одноразовий: після вдалого build() будь-який виклик дає BuilderReuseError.
    """

    entity_class = Person

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._built = False

    def _set(self, field: str, value: Any):
        self._check_not_built()
        self._values[field] = value
        return self

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderReuseError(f"{type(self).__name__} вже використано; створіть новий білдер")

    def set_name(self, name: str):
        return self._set("name", name)

    def set_surname(self, surname: str):
        return self._set("surname", surname)

    def set_patronymic(self, patronymic: str):
        return self._set("patronymic", patronymic)

    def set_birth_month(self, month: int):
        self._check_not_built()
        return self._set("birth_month", validate_month(month))

    def set_birth_year(self, year: int):
        self._check_not_built()
        return self._set("birth_year", validate_birth_year(year))

    def build(self):
        self._check_not_built()
        for field in self.entity_class.FIELDS:
            # порожній рядок вважається не заданим полем
            if self._values.get(field) in (None, ""):
                raise IncompleteBuilderError(field)

        entity = self.entity_class(**self._values)
        self._built = True
        logger.debug("Створено %r", entity)
        return entity


class StudentBuilder(PersonBuilder):
    """Білдер студента: поля людини плюс рік вступу та спеціальність."""

    entity_class = Student

    def set_admission_year(self, year: int):
        self._check_not_built()
        return self._set("admission_year", validate_admission_year(year))

    def set_specialty(self, specialty: str):
        return self._set("specialty", specialty)
