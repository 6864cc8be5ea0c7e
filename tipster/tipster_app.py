"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.widgets import Button, Header, Static

from tipster.config import (
    GROUP_SIZE_MAX,
    GROUP_SIZE_MIN,
    SLIDER_WIDTH_CHARS,
    TAX_RATE_MAX,
    TAX_RATE_MIN,
    TAX_RATE_STEP,
    resolve_debug_log_path,
)
from tipster.errors import TipsterError
from tipster.events import (
    ERROR_MESSAGES,
    BillEvent,
    ClearPressed,
    DecimalPointPressed,
    DigitPressed,
    EventOutcome,
    GroupSizeChanged,
    TaxRateChanged,
    apply_event,
    clamp_tax_rate,
    floor_group_size,
)
from tipster.models import BillState
from tipster.rendering import ScreenView, format_slider, format_status, format_tax_rows, render_screen

_KEYPAD_LAYOUT = ("7", "8", "9", "4", "5", "6", "1", "2", "3", ".", "0", "C")
_DIGIT_KEYS = frozenset("0123456789")


def _keypad_id(label: str) -> str:
    if label == ".":
        return "key-point"
    if label == "C":
        return "key-clear"
    return f"key-{label}"


class TipsterApp(App):
    """A Textual app for entering a bill and comparing tax/tip scenarios."""

    TITLE = "Tipster"
    SUB_TITLE = "Tax + split calculator"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #bill-pane {
        width: 3fr;
        border: round $primary;
        padding: 0 1;
    }

    #keypad-pane {
        width: 2fr;
        border: round $secondary;
        padding: 0 1;
    }

    #amount {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
        content-align: right middle;
        text-style: bold;
    }

    #tax-rows {
        height: auto;
        margin: 1 0;
    }

    #keypad {
        grid-size: 3 4;
        grid-gutter: 0 1;
        height: 1fr;
    }

    #keypad Button {
        width: 100%;
        min-width: 4;
    }

    #status {
        height: 1;
    }
    """

    BINDINGS = [
        ("left_square_bracket", "nudge_tax(-1)", "Tax -"),
        ("right_square_bracket", "nudge_tax(1)", "Tax +"),
        ("minus", "nudge_group(-1)", "Group -"),
        ("plus", "nudge_group(1)", "Group +"),
        ("equals_sign", "nudge_group(1)", "Group +"),
        ("c", "clear", "Clear"),
        ("escape", "clear", "Clear"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.bill = BillState()
        self.last_view: ScreenView | None = None
        self.last_outcome: EventOutcome | None = None
        self._debug_log_path = resolve_debug_log_path()
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="bill-pane"):
                yield Static(id="amount")
                yield Static(id="tax-slider")
                yield Static(id="group-slider")
                yield Static(id="tax-rows")
                yield Static(id="status")
            with Vertical(id="keypad-pane"):
                with Grid(id="keypad"):
                    for label in _KEYPAD_LAYOUT:
                        yield Button(label, id=_keypad_id(label))

    def on_mount(self) -> None:
        self._log_debug(f"on_mount bill={self.bill!r}")
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        char = event.character
        if char is None or len(char) != 1:
            return

        if char in _DIGIT_KEYS:
            self.apply_input(DigitPressed(int(char)))
            event.stop()
            return

        if char == ".":
            self.apply_input(DecimalPointPressed())
            event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "key-point":
            self.apply_input(DecimalPointPressed())
        elif button_id == "key-clear":
            self.apply_input(ClearPressed())
        elif button_id.startswith("key-"):
            self.apply_input(DigitPressed(int(button_id[len("key-") :])))
        event.stop()

    def action_clear(self) -> None:
        self.apply_input(ClearPressed())

    def action_nudge_tax(self, steps: int) -> None:
        rate = round(self.bill.tax_rate + steps * TAX_RATE_STEP, 4)
        self.apply_input(TaxRateChanged(clamp_tax_rate(rate)))

    def action_nudge_group(self, steps: int) -> None:
        self.apply_input(GroupSizeChanged(floor_group_size(self.bill.group_size + steps)))

    def apply_input(self, event: BillEvent) -> EventOutcome:
        """Apply one input event and re-render the screen."""
        outcome = apply_event(self.bill, event)
        self.last_outcome = outcome
        self._log_debug(
            f"event={event!r} ok={outcome.ok} error={outcome.error.value if outcome.error else None} "
            f"amount={self.bill.amount_text!r}"
        )
        self._refresh_all()
        return outcome

    def _refresh_all(self) -> None:
        try:
            view = render_screen(self.bill)
        except TipsterError as exc:
            # Keep showing the previous view.
            self.last_outcome = EventOutcome(ok=False, error=exc.kind, message=ERROR_MESSAGES[exc.kind])
            self._log_debug(f"render_failed error={exc!r}")
            self._refresh_status()
            return

        self.last_view = view
        try:
            self.query_one("#amount", Static).update(view.amount_text)
            self.query_one("#tax-rows", Static).update(format_tax_rows(view.rows))
        except NoMatches:
            return
        self._refresh_sliders(view)
        self._refresh_status()

    def _refresh_sliders(self, view: ScreenView) -> None:
        tax_bar = format_slider(self.bill.tax_rate, TAX_RATE_MIN, TAX_RATE_MAX, SLIDER_WIDTH_CHARS)
        tax_bar.append(f"  {view.tax_rate_text}")
        self.query_one("#tax-slider", Static).update(tax_bar)

        group_bar = format_slider(self.bill.group_size, GROUP_SIZE_MIN, GROUP_SIZE_MAX, SLIDER_WIDTH_CHARS)
        group_bar.append(f"  {view.group_text}")
        self.query_one("#group-slider", Static).update(group_bar)

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status", Static)
        except NoMatches:
            return
        status.update(format_status(self.last_outcome))
