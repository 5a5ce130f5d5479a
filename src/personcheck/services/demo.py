"""Fixed demonstration inputs and their run."""

from __future__ import annotations

from datetime import datetime

from personcheck.domain.models import PersonInput
from personcheck.services.result import ServiceResult
from personcheck.services.validator import ValidationService

LONG_NAME = "ReallyLongNameToTestTheMaxCharacterLengthRatherThanJustReducingIt"


def demo_inputs(now: datetime) -> list[PersonInput]:
    """The four demonstration records, in reporting order."""
    return [
        # no name
        PersonInput(name=None, date_of_birth=now, borough=5),
        # born before 1905
        PersonInput(name="Dave", date_of_birth=datetime(1904, 11, 4), borough=2),
        # name too long and a date in the future; the name is checked first
        PersonInput(name=LONG_NAME, date_of_birth=datetime.max, borough=None),
        # valid
        PersonInput(name="Steven", date_of_birth=datetime(1986, 4, 17), borough=3),
    ]


def run_demo(now: datetime | None = None) -> list[ServiceResult]:
    """Validate each demonstration input, labelled ``Input 1`` .. ``Input 4``."""
    now = now or datetime.now()
    svc = ValidationService(now=now)
    return [
        svc.validate(person, label=f"Input {index}")
        for index, person in enumerate(demo_inputs(now), start=1)
    ]
