import pytest

from tipster.errors import ErrorKind
from tipster.tipster_app import TipsterApp

SCREEN_SIZE = (100, 32)


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("TIPSTER_DEBUG_LOG", str(path))
    return path


async def run_keys(*keys):
    app = TipsterApp()
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press(*keys)
        await pilot.pause()
    return app


async def run_clicks(*selectors):
    app = TipsterApp()
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        for selector in selectors:
            await pilot.click(selector)
            await pilot.pause()
    return app


@pytest.mark.asyncio
async def test_initial_view():
    app = await run_keys()
    assert app.last_view is not None
    assert app.last_view.amount_text == "0"
    assert app.last_view.group_text == "Group: 1"


@pytest.mark.asyncio
async def test_typing_an_amount():
    app = await run_keys("1", "2", ".", "4")
    assert app.bill.amount_text == "12.4"
    assert app.last_view.amount_text == "12.4"
    assert app.last_view.rows[1].tax_text == "0.62"


@pytest.mark.asyncio
async def test_non_ascii_digit_keys_are_ignored():
    app = await run_keys("²", "5")
    assert app.bill.amount_text == "5"
    assert app.last_outcome.ok


@pytest.mark.asyncio
async def test_third_decimal_reports_error_and_keeps_view():
    app = await run_keys("1", ".", "2", "5", "9")
    assert app.bill.amount_text == "1.25"
    assert app.last_view.amount_text == "1.25"
    assert app.last_outcome.error is ErrorKind.MAX_DECIMAL


@pytest.mark.asyncio
async def test_clear_key():
    app = await run_keys("4", "2", "c")
    assert app.bill.amount_text == "0"
    assert app.last_outcome.ok


@pytest.mark.asyncio
async def test_escape_clears():
    app = await run_keys("9", ".", "5", "escape")
    assert app.bill.amount_text == "0"


@pytest.mark.asyncio
async def test_sliders_move_by_key():
    app = await run_keys("1", "0", "0", "]", "]", "+", "+", "-")
    assert app.bill.tax_rate == pytest.approx(0.02)
    assert app.bill.group_size == 2
    assert app.last_view.rows[0].total_text == "51.00"


@pytest.mark.asyncio
async def test_equals_key_grows_group():
    app = await run_keys("=", "=")
    assert app.bill.group_size == 3
    assert app.last_view.group_text == "Group: 3"


@pytest.mark.asyncio
async def test_sliders_stay_in_range():
    app = await run_keys("[", "-")
    assert app.bill.tax_rate == 0.0
    assert app.bill.group_size == 1


@pytest.mark.asyncio
async def test_keypad_buttons_enter_amount():
    app = await run_clicks("#key-7", "#key-point", "#key-5")
    assert app.bill.amount_text == "7.5"
    assert app.last_view.amount_text == "7.5"


@pytest.mark.asyncio
async def test_keypad_clear_button():
    app = await run_clicks("#key-3", "#key-0", "#key-clear")
    assert app.bill.amount_text == "0"


@pytest.mark.asyncio
async def test_keypad_second_point_reports_error():
    app = await run_clicks("#key-point", "#key-point")
    assert app.bill.amount_text == "0."
    assert app.last_outcome.error is ErrorKind.DUPLICATE_DECIMAL


@pytest.mark.asyncio
async def test_events_are_logged(debug_log):
    await run_keys("7")
    lines = debug_log.read_text(encoding="utf-8").splitlines()
    assert any("app_init" in line for line in lines)
    assert any("DigitPressed(digit=7)" in line and "ok=True" in line for line in lines)
