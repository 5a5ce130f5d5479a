"""Tests for the demonstration inputs."""

from datetime import datetime

from personcheck.domain.predicates import MAX_LENGTH
from personcheck.services.demo import LONG_NAME, demo_inputs, run_demo


class TestDemoInputs:
    def test_four_inputs_in_order(self, fixed_now: datetime) -> None:
        inputs = demo_inputs(fixed_now)
        assert [p.name for p in inputs] == [None, "Dave", LONG_NAME, "Steven"]
        assert [p.borough for p in inputs] == [5, 2, None, 3]
        assert inputs[0].date_of_birth == fixed_now
        assert inputs[2].date_of_birth == datetime.max

    def test_long_name_exceeds_limit(self) -> None:
        assert len(LONG_NAME) > MAX_LENGTH


class TestRunDemo:
    def test_outcomes(self, fixed_now: datetime) -> None:
        results = run_demo(fixed_now)
        assert [r.meta["label"] for r in results if r.meta] == [
            "Input 1",
            "Input 2",
            "Input 3",
            "Input 4",
        ]
        assert [r.ok for r in results] == [False, False, False, True]
        assert [r.error.message for r in results if r.error] == [
            "Name MustBeEntered",
            "DOB Before1905",
            "Name MaxLength",
        ]
        assert results[3].data["name"] == "Steven"

    def test_default_now(self) -> None:
        results = run_demo()
        assert results[0].error is not None
        assert results[0].error.code == "name.must_be_entered"
