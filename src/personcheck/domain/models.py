"""Person records before and after validation.

``PersonInput`` is the candidate record; every field may be absent.
``ValidPerson`` requires name and date of birth, so it cannot be
constructed from a record that skipped the presence checks.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel


class PersonInput(BaseModel):
    """Candidate person record with optional fields."""

    model_config = {"frozen": True}

    name: str | None = None
    date_of_birth: datetime | date | None = None
    borough: int | None = None  # passed through, never validated


class ValidPerson(BaseModel):
    """A person record that passed every applicable rule."""

    model_config = {"frozen": True}

    name: str
    date_of_birth: datetime | date
    borough: int | None = None
