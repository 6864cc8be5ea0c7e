"""Domain models for tipster."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from tipster.config import MAX_DECIMAL_PLACES
from tipster.errors import DivisionUndefined, DuplicateDecimalError, MaxDecimalError, ParseError

_AMOUNT_PATTERN = re.compile(r"(?=.*\d)\d*\.?\d*")


class TaxAddition(Enum):
    """Supplemental rates layered onto the base tax rate, one per display row."""

    NONE = 0.0
    LOW = 0.05
    HIGH = 0.1


@dataclass(frozen=True)
class TaxScenario:
    """Computed figures for one tax addition."""

    addition: TaxAddition
    effective_rate: float
    tax_amount: float
    total_per_person: float


@dataclass
class BillState:
    """The bill being entered, plus the slider-driven tax rate and group size.

    ``amount_text`` holds digits and at most one decimal point and is never
    empty. Rejected mutations raise before touching any field.
    """

    amount_text: str = "0"
    tax_rate: float = 0.0
    group_size: int = 1

    def append_digit(self, digit: int) -> None:
        if not 0 <= digit <= 9:
            raise ValueError(f"digit must be between 0 and 9, got {digit!r}")
        if self.has_max_decimal_places(MAX_DECIMAL_PLACES):
            raise MaxDecimalError(f"at most {MAX_DECIMAL_PLACES} decimal places allowed")

        if self.amount_text == "0":
            self.amount_text = str(digit)
        else:
            self.amount_text += str(digit)

    def append_decimal_point(self) -> None:
        if "." in self.amount_text:
            raise DuplicateDecimalError("amount already has a decimal point")
        self.amount_text += "."

    def clear(self) -> None:
        self.amount_text = "0"

    def set_tax_rate(self, rate: float) -> None:
        self.tax_rate = rate

    def set_group_size(self, size: int) -> None:
        self.group_size = size

    def has_max_decimal_places(self, max_places: int) -> bool:
        """Return True if the amount already carries ``max_places`` digits after its point."""
        integer_part = self.amount_text.split(".")[0]
        return len(self.amount_text) - len(integer_part) >= max_places + 1

    def amount(self) -> float:
        """Parse the amount text; intermediate forms like ``"5."`` are accepted."""
        if not _AMOUNT_PATTERN.fullmatch(self.amount_text):
            raise ParseError(f"cannot parse amount {self.amount_text!r}")
        return float(self.amount_text)

    def effective_rate(self, addition: TaxAddition) -> float:
        # No clamp: a maxed-out slider plus an addition may exceed 100%.
        return self.tax_rate + addition.value

    def tax_amount(self, addition: TaxAddition) -> float:
        return self.amount() * self.effective_rate(addition)

    def total_per_person(self, addition: TaxAddition) -> float:
        if self.group_size <= 0:
            raise DivisionUndefined(f"group size must be positive, got {self.group_size}")
        return (self.amount() + self.tax_amount(addition)) / self.group_size

    def scenario(self, addition: TaxAddition) -> TaxScenario:
        return TaxScenario(
            addition=addition,
            effective_rate=self.effective_rate(addition),
            tax_amount=self.tax_amount(addition),
            total_per_person=self.total_per_person(addition),
        )

    def scenarios(self) -> list[TaxScenario]:
        return [self.scenario(addition) for addition in TaxAddition]
