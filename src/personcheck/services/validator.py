"""Person validation pipeline.

Three linear stages chained with :meth:`Result.bind`::

    Start -> NameCheck -> DOBCheck -> Finalize -> {Valid | Invalid(reason)}

The first failing stage short-circuits the rest; only one error is ever
reported, even when several fields are invalid.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import partial

from personcheck.domain import predicates
from personcheck.domain.models import PersonInput, ValidPerson
from personcheck.domain.result import Result
from personcheck.domain.validations import DobValidation, NameValidation, PersonValidation
from personcheck.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _reject(error: PersonValidation) -> Result[PersonInput]:
    logger.debug("Rule failed: %s", error.code)
    return Result.failure(error)


def validate_name(person: PersonInput) -> Result[PersonInput]:
    """Check the name is present, then that it is not too long."""
    if predicates.must_be_entered(person.name):
        return _reject(PersonValidation.for_name(NameValidation.MUST_BE_ENTERED))
    if predicates.max_length(person.name):
        return _reject(PersonValidation.for_name(NameValidation.MAX_LENGTH))
    return Result.success(person)


def validate_date_of_birth(
    person: PersonInput,
    *,
    now: datetime | None = None,
) -> Result[PersonInput]:
    """Check the date of birth: present, not in the future, not before 1905."""
    dob = person.date_of_birth
    if predicates.must_be_entered(dob):
        return _reject(PersonValidation.for_dob(DobValidation.MUST_BE_ENTERED))
    if predicates.future_date(dob, now=now):
        return _reject(PersonValidation.for_dob(DobValidation.FUTURE_DATE))
    if predicates.before_1905(dob):
        return _reject(PersonValidation.for_dob(DobValidation.BEFORE_1905))
    return Result.success(person)


def finalize(person: PersonInput) -> Result[ValidPerson]:
    """Promote a checked input to a :class:`ValidPerson`.

    Precondition: name and date of birth are present (guaranteed by the
    earlier stages). ``ValidPerson`` requires both, so a reordered pipeline
    fails at construction instead of producing a half-valid record.
    """
    return Result.success(
        ValidPerson(
            name=person.name,
            date_of_birth=person.date_of_birth,
            borough=person.borough,
        )
    )


def validate_person(
    person: PersonInput,
    *,
    now: datetime | None = None,
) -> Result[ValidPerson]:
    """Run name, date-of-birth and finalize stages; stop at the first error.

    Args:
        person: The candidate record.
        now: Evaluation instant for the future-date rule. Defaults to the
            current time when the rule runs.
    """
    return (
        Result.success(person)
        .bind(validate_name)
        .bind(partial(validate_date_of_birth, now=now))
        .bind(finalize)
    )


class ValidationService:
    """Adapts pipeline results to :class:`ServiceResult` for the CLI.

    Usage::

        svc = ValidationService()
        result = svc.validate(PersonInput(name="Steven", ...), label="Input 4")
    """

    def __init__(self, *, now: datetime | None = None) -> None:
        self._now = now

    def validate(self, person: PersonInput, *, label: str = "Input") -> ServiceResult:
        """Validate *person* and report the outcome under *label*."""
        outcome = validate_person(person, now=self._now)
        error = outcome.error
        if error is None:
            logger.debug("%s passed validation", label)
            data = outcome.value.model_dump(mode="json") if outcome.value is not None else {}
            return ServiceResult(
                ok=True,
                op="validate_person",
                data=data,
                meta={"label": label},
            )

        logger.debug("%s failed validation: %s", label, error.code)
        return ServiceResult(
            ok=False,
            op="validate_person",
            error=ServiceError(
                code=error.code,
                message=str(error),
                detail={"field": error.field.value, "rule": error.rule},
            ),
            meta={"label": label},
        )
