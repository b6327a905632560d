"""Unit tests for the core demographic entities."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.core.entities import Person, parse_timestamp


def test_person_from_mapping_accepts_camel_case_timestamp() -> None:
    person = Person.from_mapping(
        {"id": 7, "name": "Ana", "age": "29", "createdAt": "2024-05-01T08:30:00Z"}
    )

    assert person.id == "7"
    assert person.age == 29
    assert person.created_at == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    assert person.gender is None


def test_person_from_mapping_treats_blank_values_as_missing() -> None:
    person = Person.from_mapping(
        {"id": "1", "name": None, "age": float("nan"), "created_at": "", "gender": " "}
    )

    assert person.name == ""
    assert person.age is None
    assert person.created_at is None
    assert person.gender is None


def test_parse_timestamp_normalises_to_utc() -> None:
    offset = timezone(timedelta(hours=2))

    assert parse_timestamp("2024-01-01T12:00:00+02:00") == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp(datetime(2024, 1, 1, 12, tzinfo=offset)).tzinfo == timezone.utc
    assert parse_timestamp("2024-01-01").tzinfo == timezone.utc


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-15T10:30:00.12345+00:00", datetime(2024, 1, 15, 10, 30, 0, 123450, tzinfo=timezone.utc)),
        ("2024-01-15 10:30:00+00", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
        ("2024-01-15T10:30:00Z", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
    ],
)
def test_parse_timestamp_accepts_database_formats(raw: str, expected: datetime) -> None:
    assert parse_timestamp(raw) == expected


def test_person_from_mapping_accepts_short_fraction_timestamps() -> None:
    person = Person.from_mapping(
        {"id": "1", "name": "Ana", "age": 30, "created_at": "2024-01-15T10:30:00.12345+00:00"}
    )

    assert person.created_at == datetime(2024, 1, 15, 10, 30, 0, 123450, tzinfo=timezone.utc)


def test_person_from_mapping_accepts_whole_float_ages() -> None:
    assert Person.from_mapping({"id": "1", "name": "Ana", "age": 25.0}).age == 25


@pytest.mark.parametrize("age", [25.9, "25.5", "abc"])
def test_person_from_mapping_rejects_non_whole_ages(age: object) -> None:
    with pytest.raises(ValueError):
        Person.from_mapping({"id": "1", "name": "Ana", "age": age})
