# registry/config.py
"""Константи застосунку: межі років, налаштування логування, демонстраційні дані."""
import logging

# --- ВАЛІДАЦІЯ ---
MIN_BIRTH_YEAR = 1900

# --- ЛОГУВАННЯ ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# --- ДЕМОНСТРАЦІЙНІ ДАНІ ---
SAMPLE_PEOPLE = [
    {
        "name": "Іван",
        "surname": "Петренко",
        "patronymic": "Олександрович",
        "birth_month": 3,
        "birth_year": 1985,
    },
    {
        "name": "Марія",
        "surname": "Коваленко",
        "patronymic": "Василівна",
        "birth_month": 7,
        "birth_year": 1990,
    },
]

SAMPLE_STUDENTS = [
    {
        "name": "Олег",
        "surname": "Шевченко",
        "patronymic": "Іванович",
        "birth_month": 9,
        "birth_year": 2003,
        "admission_year": 2021,
        "specialty": "Комп'ютерні науки",
    },
    {
        "name": "Анна",
        "surname": "Мельник",
        "patronymic": "Петрівна",
        "birth_month": 12,
        "birth_year": 2004,
        "admission_year": 2022,
        "specialty": "Програмна інженерія",
    },
]
