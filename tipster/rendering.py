"""Rendering helpers: pure conversion from bill state to display text."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from tipster.events import EventOutcome
from tipster.models import BillState, TaxAddition, TaxScenario

ROW_LABELS: dict[TaxAddition, str] = {
    TaxAddition.NONE: "Base",
    TaxAddition.LOW: "+5%",
    TaxAddition.HIGH: "+10%",
}


@dataclass(frozen=True)
class TaxRowDisplay:
    """The three text slots of one scenario row."""

    rate_text: str
    tax_text: str
    total_text: str


@dataclass(frozen=True)
class ScreenView:
    """Everything the screen shows for one bill state."""

    amount_text: str
    group_text: str
    tax_rate_text: str
    rows: tuple[TaxRowDisplay, TaxRowDisplay, TaxRowDisplay]


def format_rate(rate: float) -> str:
    return "%.0f%%" % (rate * 100)


def format_money(value: float) -> str:
    return "%.2f" % value


def render_tax_row(scenario: TaxScenario) -> TaxRowDisplay:
    return TaxRowDisplay(
        rate_text=format_rate(scenario.effective_rate),
        tax_text=format_money(scenario.tax_amount),
        total_text=format_money(scenario.total_per_person),
    )


def render_screen(state: BillState) -> ScreenView:
    """Build the full view; raises the bill errors if the state cannot be computed."""
    none_row, low_row, high_row = (render_tax_row(scenario) for scenario in state.scenarios())
    return ScreenView(
        amount_text=state.amount_text,
        group_text=f"Group: {state.group_size}",
        tax_rate_text=f"Tax: {format_rate(state.tax_rate)}",
        rows=(none_row, low_row, high_row),
    )


def format_tax_rows(rows: tuple[TaxRowDisplay, ...]) -> Text:
    """Render the scenario rows as an aligned table."""
    text = Text()
    text.append(f"{'':<6}{'Rate':>6}{'Tax':>12}{'Each':>12}", style="bold")
    for addition, row in zip(TaxAddition, rows):
        text.append("\n")
        text.append(f"{ROW_LABELS[addition]:<6}", style="dim")
        text.append(f"{row.rate_text:>6}")
        text.append(f"{row.tax_text:>12}")
        text.append(f"{row.total_text:>12}", style="bold #5fbf72")
    return text


def format_slider(value: float, lo: float, hi: float, width: int) -> Text:
    """Render a horizontal slider bar with a knob at ``value``."""
    width = max(2, width)
    span = hi - lo
    fraction = 0.0 if span <= 0 else (value - lo) / span
    fraction = min(1.0, max(0.0, fraction))
    knob = round(fraction * (width - 1))

    text = Text()
    text.append("━" * knob, style="#2f6db5")
    text.append("●", style="bold #ffffff")
    text.append("─" * (width - 1 - knob), style="dim")
    return text


def format_status(outcome: EventOutcome | None) -> Text:
    if outcome is None or outcome.ok:
        return Text("Ready", style="dim")
    return Text(outcome.message, style="bold #ffb3b3")
