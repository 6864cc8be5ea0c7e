import pytest

from tipster.errors import DivisionUndefined, ErrorKind
from tipster.events import EventOutcome
from tipster.models import BillState
from tipster.rendering import (
    TaxRowDisplay,
    format_money,
    format_rate,
    format_slider,
    format_status,
    format_tax_rows,
    render_screen,
)


def test_format_rate_and_money():
    assert format_rate(0.15) == "15%"
    assert format_rate(1.1) == "110%"
    assert format_money(5) == "5.00"
    assert format_money(33.333) == "33.33"


def test_render_screen_rows():
    view = render_screen(BillState(amount_text="100", tax_rate=0.0, group_size=2))
    assert view.amount_text == "100"
    assert view.group_text == "Group: 2"
    assert view.tax_rate_text == "Tax: 0%"
    assert view.rows == (
        TaxRowDisplay("0%", "0.00", "50.00"),
        TaxRowDisplay("5%", "5.00", "52.50"),
        TaxRowDisplay("10%", "10.00", "55.00"),
    )


def test_render_screen_keeps_raw_amount_text():
    view = render_screen(BillState(amount_text="5."))
    assert view.amount_text == "5."
    assert view.rows[0].total_text == "5.00"


def test_render_screen_propagates_errors():
    with pytest.raises(DivisionUndefined):
        render_screen(BillState(group_size=0))


def test_format_tax_rows_lists_every_row():
    view = render_screen(BillState(amount_text="20", tax_rate=0.1))
    plain = format_tax_rows(view.rows).plain
    assert len(plain.splitlines()) == 4
    assert "+10%" in plain
    assert "24.00" in plain


def test_format_slider_knob_positions():
    assert format_slider(0.0, 0.0, 1.0, 10).plain == "●" + "─" * 9
    assert format_slider(1.0, 0.0, 1.0, 10).plain == "━" * 9 + "●"
    assert len(format_slider(5.0, 0.0, 1.0, 10).plain) == 10


def test_format_status():
    assert format_status(None).plain == "Ready"
    assert format_status(EventOutcome(ok=True)).plain == "Ready"
    failed = EventOutcome(ok=False, error=ErrorKind.MAX_DECIMAL, message="Only two decimal places allowed")
    assert format_status(failed).plain == "Only two decimal places allowed"
