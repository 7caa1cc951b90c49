"""Tests for the Fact value object."""

import pytest
from pydantic import ValidationError

from catfact.fact.domain.fact import Fact


class TestFact:
    def test_holds_text_and_length(self) -> None:
        fact = Fact(text="Cats sleep 70% of their lives.", length=32)

        assert fact.text == "Cats sleep 70% of their lives."
        assert fact.length == 32

    def test_length_is_optional(self) -> None:
        assert Fact(text="A group of cats is called a clowder.").length is None

    def test_length_is_not_checked_against_text(self) -> None:
        fact = Fact(text="short", length=999)
        assert fact.length == 999

    def test_empty_text_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Fact(text="", length=0)

    def test_is_immutable(self) -> None:
        fact = Fact(text="Cats purr.", length=10)
        with pytest.raises(ValidationError):
            fact.text = "Dogs bark."  # type: ignore[misc]

    def test_dump_uses_external_field_names(self) -> None:
        fact = Fact(text="Cats purr.", length=10)
        assert fact.model_dump() == {"text": "Cats purr.", "length": 10}
