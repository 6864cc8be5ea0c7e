"""Input events and the explicit outcomes of applying them to a bill."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from tipster.config import GROUP_SIZE_MAX, GROUP_SIZE_MIN, TAX_RATE_MAX, TAX_RATE_MIN
from tipster.errors import ErrorKind, TipsterError
from tipster.models import BillState, TaxAddition


@dataclass(frozen=True)
class DigitPressed:
    digit: int


@dataclass(frozen=True)
class DecimalPointPressed:
    pass


@dataclass(frozen=True)
class ClearPressed:
    pass


@dataclass(frozen=True)
class TaxRateChanged:
    rate: float


@dataclass(frozen=True)
class GroupSizeChanged:
    size: int


BillEvent = DigitPressed | DecimalPointPressed | ClearPressed | TaxRateChanged | GroupSizeChanged


@dataclass(frozen=True)
class EventOutcome:
    """Result of one event: either applied, or rejected with the state left as it was."""

    ok: bool
    error: ErrorKind | None = None
    message: str = ""


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MAX_DECIMAL: "Only two decimal places allowed",
    ErrorKind.DUPLICATE_DECIMAL: "Amount already has a decimal point",
    ErrorKind.PARSE: "Amount is not a number",
    ErrorKind.DIVISION_UNDEFINED: "Group size must be at least 1",
}


def clamp_tax_rate(value: float) -> float:
    """Clamp a slider value into the supported tax-rate range."""
    return min(TAX_RATE_MAX, max(TAX_RATE_MIN, value))


def floor_group_size(value: float) -> int:
    """Floor a continuous slider value to a whole group size within range."""
    return min(GROUP_SIZE_MAX, max(GROUP_SIZE_MIN, math.floor(value)))


def _mutate(state: BillState, event: BillEvent) -> None:
    if isinstance(event, DigitPressed):
        state.append_digit(event.digit)
    elif isinstance(event, DecimalPointPressed):
        state.append_decimal_point()
    elif isinstance(event, ClearPressed):
        state.clear()
    elif isinstance(event, TaxRateChanged):
        state.set_tax_rate(event.rate)
    elif isinstance(event, GroupSizeChanged):
        state.set_group_size(event.size)
    else:
        raise TypeError(f"unsupported event: {event!r}")


def apply_event(state: BillState, event: BillEvent) -> EventOutcome:
    """Apply ``event`` to ``state`` in place.

    The event only sticks if the resulting state can still produce every
    display row; otherwise the previous fields are restored.
    """
    previous = replace(state)
    try:
        _mutate(state, event)
        for addition in TaxAddition:
            state.total_per_person(addition)
    except TipsterError as exc:
        state.amount_text = previous.amount_text
        state.tax_rate = previous.tax_rate
        state.group_size = previous.group_size
        return EventOutcome(ok=False, error=exc.kind, message=ERROR_MESSAGES[exc.kind])
    return EventOutcome(ok=True)
