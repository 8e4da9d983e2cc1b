"""Unit tests for SleepTrackerWidget."""

import pytest
import pytest_asyncio
from PySide6.QtCore import Qt

from sleeptracker.core.formatting import HISTORY_TITLE
from sleeptracker.core.models import SleepNight
from sleeptracker.core.tracker import SleepTrackerViewModel
from sleeptracker.desktop.widgets import SleepTrackerWidget


@pytest_asyncio.fixture
async def view_model(qapp, dao, clock):
    """Create an initialized tracker view model."""
    view_model = SleepTrackerViewModel(database=dao, clock=clock)
    await view_model.initialization
    yield view_model
    view_model.close()


@pytest.fixture
def widget(qtbot, view_model):
    """Create a SleepTrackerWidget bound to the view model."""
    widget = SleepTrackerWidget(view_model)
    qtbot.addWidget(widget)
    widget.show()
    return widget


@pytest.mark.asyncio
async def test_initial_rendering(widget):
    """Test that an empty history only allows Start."""
    assert widget.session_control.button_states() == {
        "start": True,
        "stop": False,
        "clear": False,
    }
    assert HISTORY_TITLE in widget.history_view.toPlainText()


@pytest.mark.asyncio
async def test_start_click_opens_night(qtbot, widget, view_model, wait_until):
    """Test that clicking Start starts a night and updates the buttons."""
    qtbot.mouseClick(widget.session_control._start_button, Qt.MouseButton.LeftButton)

    await wait_until(lambda: view_model.tonight.value is not None)

    assert widget.session_control.button_states() == {
        "start": False,
        "stop": True,
        "clear": True,
    }
    assert "Start:" in widget.history_view.toPlainText()


@pytest.mark.asyncio
async def test_history_follows_store_changes(widget, dao, wait_until):
    """Test that nights written elsewhere show up in the history."""
    dao.insert(SleepNight(start_time_milli=1_000, end_time_milli=3_600_000, notes="nap"))

    await wait_until(lambda: "nap" in widget.history_view.toPlainText())

    assert widget.session_control.button_states()["clear"] is True


@pytest.mark.asyncio
async def test_clear_click_empties_history(qtbot, widget, view_model, clock, wait_until):
    """Test that clicking Clear removes every night."""
    await view_model.start_session()
    clock.advance(1_000)
    await view_model.stop_session()

    qtbot.mouseClick(widget.session_control._clear_button, Qt.MouseButton.LeftButton)

    await wait_until(lambda: view_model.nights.value == [])
    assert "Start:" not in widget.history_view.toPlainText()
    assert widget.session_control.button_states()["clear"] is False
