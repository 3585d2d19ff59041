# registry/repositories.py
"""Сховища в пам'яті для людей і студентів."""
import logging
from typing import Generic, Iterator, List, Tuple, Type, TypeVar

from .errors import PreconditionError
from .models import Person, Student

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Person)


class Repository(Generic[T]):
    """Упорядкована колекція сутностей одного типу.

    Порядок додавання зберігається, дублікати дозволені.
    Синхронізації немає: репозиторій розрахований на один потік.
    """

    entity_type: Type[Person] = Person

    def __init__(self):
        self._items: List[T] = []

    def add(self, item: T) -> None:
        if item is None:
            raise PreconditionError("Не можна додати порожній об'єкт")
        if not isinstance(item, self.entity_type):
            raise PreconditionError(
                f"{type(self).__name__} приймає лише {self.entity_type.__name__}, "
                f"отримано {type(item).__name__}"
            )
        self._items.append(item)
        logger.debug("%s: додано %r", type(self).__name__, item)

    def get_all(self) -> Tuple[T, ...]:
        """Повертає знімок усіх записів; зміни ззовні не впливають на сховище."""
        return tuple(self._items)

    def _find_all_by(self, field: str, value: str) -> Iterator[T]:
        target = value.casefold()
        return (item for item in self._items if getattr(item, field).casefold() == target)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())


class PersonRepository(Repository[Person]):
    entity_type = Person

    def find_all_by_name(self, name: str) -> Iterator[Person]:
        """Знаходить усіх людей за іменем (без урахування регістру)."""
        return self._find_all_by("name", name)

    def find_all_by_surname(self, surname: str) -> Iterator[Person]:
        return self._find_all_by("surname", surname)


class StudentRepository(Repository[Student]):
    entity_type = Student

    def find_all_by_name(self, name: str) -> Iterator[Student]:
        """Знаходить усіх студентів за іменем (без урахування регістру)."""
        return self._find_all_by("name", name)

    def find_all_by_specialty(self, specialty: str) -> Iterator[Student]:
        return self._find_all_by("specialty", specialty)
