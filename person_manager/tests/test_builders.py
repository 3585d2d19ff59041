import pytest

from registry import models
from registry.builders import PersonBuilder, StudentBuilder
from registry.errors import BuilderReuseError, IncompleteBuilderError, ValidationError
from registry.models import Person, Student


def full_person_builder() -> PersonBuilder:
    return (
        PersonBuilder()
        .set_name("Іван")
        .set_surname("Петренко")
        .set_patronymic("Олександрович")
        .set_birth_month(3)
        .set_birth_year(1985)
    )


def full_student_builder() -> StudentBuilder:
    return (
        StudentBuilder()
        .set_name("Олег")
        .set_surname("Шевченко")
        .set_patronymic("Іванович")
        .set_birth_month(9)
        .set_birth_year(2003)
        .set_admission_year(2021)
        .set_specialty("Комп'ютерні науки")
    )


def test_person_builder_matches_constructor(ivan):
    built = full_person_builder().build()
    assert isinstance(built, Person)
    assert built == ivan


def test_student_builder_matches_constructor(oleh):
    built = full_student_builder().build()
    assert isinstance(built, Student)
    assert built == oleh


def test_setters_return_builder():
    b = PersonBuilder()
    assert b.set_name("Іван") is b
    assert b.set_birth_month(1) is b


@pytest.mark.parametrize("missing", Person.FIELDS)
def test_person_builder_missing_field(missing):
    b = PersonBuilder()
    values = {"name": "Іван", "surname": "Петренко", "patronymic": "Олександрович",
              "birth_month": 3, "birth_year": 1985}
    for field, value in values.items():
        if field != missing:
            getattr(b, f"set_{field}")(value)

    with pytest.raises(IncompleteBuilderError) as exc_info:
        b.build()
    assert exc_info.value.field == missing


def test_student_builder_missing_specialty():
    b = (
        StudentBuilder()
        .set_name("Олег")
        .set_surname("Шевченко")
        .set_patronymic("Іванович")
        .set_birth_month(9)
        .set_birth_year(2003)
        .set_admission_year(2021)
    )
    with pytest.raises(IncompleteBuilderError) as exc_info:
        b.build()
    assert exc_info.value.field == "specialty"


def test_empty_string_counts_as_unset():
    b = full_person_builder().set_name("")
    with pytest.raises(IncompleteBuilderError):
        b.build()


def test_blank_name_fails_in_constructor():
    b = full_person_builder().set_name("   ")
    with pytest.raises(ValidationError):
        b.build()


def test_setters_validate_eagerly(monkeypatch):
    monkeypatch.setattr(models, "current_year", lambda: 2025)
    with pytest.raises(ValidationError):
        PersonBuilder().set_birth_month(13)
    with pytest.raises(ValidationError):
        PersonBuilder().set_birth_year(1800)
    with pytest.raises(ValidationError):
        StudentBuilder().set_admission_year(2030)


def test_cross_field_check_happens_at_build():
    b = full_student_builder().set_admission_year(2000)
    with pytest.raises(ValidationError) as exc_info:
        b.build()
    assert exc_info.value.field == "admission_year"


def test_builder_is_single_use():
    b = full_person_builder()
    b.build()
    with pytest.raises(BuilderReuseError):
        b.build()
    with pytest.raises(BuilderReuseError):
        b.set_name("Петро")


def test_failed_build_does_not_consume_builder():
    b = PersonBuilder().set_name("Іван")
    with pytest.raises(IncompleteBuilderError):
        b.build()
    person = (
        b.set_surname("Петренко")
        .set_patronymic("Олександрович")
        .set_birth_month(3)
        .set_birth_year(1985)
        .build()
    )
    assert person.name == "Іван"
