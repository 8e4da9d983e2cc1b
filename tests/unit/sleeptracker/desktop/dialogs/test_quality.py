"""Unit tests for SleepQualityDialog."""

import pytest
from PySide6.QtCore import Qt

from sleeptracker.core.models import LocaleSettings, SleepNight, SleepQuality
from sleeptracker.desktop.dialogs import SleepQualityDialog


@pytest.fixture
def night():
    """Create a finished night of 8 hours."""
    return SleepNight(
        start_time_milli=1_704_148_200_000,
        end_time_milli=1_704_148_200_000 + 8 * 3_600_000,
        night_id=3,
    )


@pytest.fixture
def dialog(qtbot, night):
    """Create a SleepQualityDialog for testing."""
    dialog = SleepQualityDialog(night, LocaleSettings())
    qtbot.addWidget(dialog)
    dialog.show()
    return dialog


def test_dialog_initialization(dialog, night):
    """Test that the dialog shows one button per rating."""
    assert dialog.windowTitle() == "How was your sleep?"
    assert dialog.night is night
    for quality in SleepQuality:
        assert dialog.quality_button(quality).text() == str(quality)
        assert dialog.quality_button(quality).isEnabled()


def test_quality_click_emits_rating(qtbot, dialog):
    """Test that clicking a rating emits its value and the notes."""
    dialog._notes_edit.setText("  late coffee  ")

    with qtbot.waitSignal(dialog.quality_selected, timeout=1000) as blocker:
        qtbot.mouseClick(dialog.quality_button(SleepQuality.POOR), Qt.MouseButton.LeftButton)

    assert blocker.args == [int(SleepQuality.POOR), "late coffee"]


def test_quality_click_blocks_second_rating(qtbot, dialog):
    """Test that the buttons are disabled after the first rating."""
    received = []
    dialog.quality_selected.connect(lambda quality, notes: received.append(quality))

    qtbot.mouseClick(dialog.quality_button(SleepQuality.OK), Qt.MouseButton.LeftButton)
    qtbot.mouseClick(dialog.quality_button(SleepQuality.EXCELLENT), Qt.MouseButton.LeftButton)

    assert received == [int(SleepQuality.OK)]
    assert not dialog.quality_button(SleepQuality.EXCELLENT).isEnabled()


def test_existing_notes_prefilled(qtbot):
    """Test that notes already on the night are shown for editing."""
    night = SleepNight(start_time_milli=0, end_time_milli=1_000, night_id=1, notes="restless")
    dialog = SleepQualityDialog(night)
    qtbot.addWidget(dialog)

    assert dialog._notes_edit.text() == "restless"
