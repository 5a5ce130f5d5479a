"""Rule tags for person validation.

Two field-scoped rule enums merged into a single tagged
:class:`PersonValidation` that names both the field and the violated rule.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator


class PersonField(StrEnum):
    """Fields of a person record that carry validation rules."""

    NAME = "name"
    DATE_OF_BIRTH = "date_of_birth"


class NameValidation(StrEnum):
    """Rules applied to the name field."""

    MUST_BE_ENTERED = "must_be_entered"
    MAX_LENGTH = "max_length"


class DobValidation(StrEnum):
    """Rules applied to the date-of-birth field, in evaluation order."""

    MUST_BE_ENTERED = "must_be_entered"
    FUTURE_DATE = "future_date"
    BEFORE_1905 = "before_1905"


FIELD_RULES: dict[PersonField, type[StrEnum]] = {
    PersonField.NAME: NameValidation,
    PersonField.DATE_OF_BIRTH: DobValidation,
}

# Display labels used when rendering a tag for humans.
FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "date_of_birth": "DOB",
}

RULE_LABELS: dict[str, str] = {
    "must_be_entered": "MustBeEntered",
    "max_length": "MaxLength",
    "future_date": "FutureDate",
    "before_1905": "Before1905",
}


class PersonValidation(BaseModel):
    """Exactly one failed rule, tagged with the field it belongs to.

    Examples:
        >>> str(PersonValidation.for_name(NameValidation.MAX_LENGTH))
        'Name MaxLength'
        >>> PersonValidation.for_dob(DobValidation.BEFORE_1905).code
        'date_of_birth.before_1905'
    """

    model_config = {"frozen": True}

    field: PersonField
    rule: str

    @model_validator(mode="after")
    def _rule_belongs_to_field(self) -> PersonValidation:
        allowed = FIELD_RULES[self.field]
        if self.rule not in {r.value for r in allowed}:
            msg = f"Rule {self.rule!r} does not apply to field {self.field.value!r}"
            raise ValueError(msg)
        return self

    @classmethod
    def for_name(cls, rule: NameValidation) -> PersonValidation:
        return cls(field=PersonField.NAME, rule=rule.value)

    @classmethod
    def for_dob(cls, rule: DobValidation) -> PersonValidation:
        return cls(field=PersonField.DATE_OF_BIRTH, rule=rule.value)

    @property
    def code(self) -> str:
        """Stable machine-readable tag, e.g. ``name.must_be_entered``."""
        return f"{self.field.value}.{self.rule}"

    def __str__(self) -> str:
        return f"{FIELD_LABELS[self.field.value]} {RULE_LABELS[self.rule]}"
