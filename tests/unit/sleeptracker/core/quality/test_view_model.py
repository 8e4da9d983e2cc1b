"""Unit tests for SleepQualityViewModel."""

import logging

import pytest

from sleeptracker.core.models import SleepNight, SleepQuality
from sleeptracker.core.quality import SleepQualityViewModel


@pytest.fixture
def closed_night_key(dao):
    """Store a finished night and return its key."""
    return dao.insert(SleepNight(start_time_milli=1_000, end_time_milli=9_000))


@pytest.fixture
def make_view_model(qapp, dao):
    """Create quality view models and close them after the test."""
    created = []

    def factory(night_key: int, **kwargs) -> SleepQualityViewModel:
        kwargs.setdefault("database", dao)
        view_model = SleepQualityViewModel(night_key, **kwargs)
        created.append(view_model)
        return view_model

    yield factory

    for view_model in created:
        view_model.close()


class TestSleepQualityViewModel:
    """Test rating a night."""

    @pytest.mark.asyncio
    async def test_initial_state(self, make_view_model, closed_night_key):
        """Nothing is pending before a rating is chosen."""
        vm = make_view_model(closed_night_key)

        assert vm.night_key == closed_night_key
        assert vm.navigate_to_sleep_tracker.value is False

    @pytest.mark.asyncio
    async def test_rating_is_saved(self, make_view_model, dao, closed_night_key):
        """The chosen rating is written to the stored night."""
        vm = make_view_model(closed_night_key)

        await vm.set_sleep_quality(SleepQuality.PRETTY_GOOD)

        night = dao.get(closed_night_key)
        assert night.sleep_quality is SleepQuality.PRETTY_GOOD
        assert night.start_time_milli == 1_000
        assert night.end_time_milli == 9_000
        assert vm.navigate_to_sleep_tracker.value is True

    @pytest.mark.asyncio
    async def test_integer_rating_and_notes(self, make_view_model, dao, closed_night_key):
        """Ratings arrive from the dialog as plain integers."""
        vm = make_view_model(closed_night_key)

        await vm.set_sleep_quality(0, "woke up at 3")

        night = dao.get(closed_night_key)
        assert night.sleep_quality is SleepQuality.VERY_BAD
        assert night.notes == "woke up at 3"

    @pytest.mark.asyncio
    async def test_existing_notes_kept_without_new_notes(
        self, make_view_model, dao, closed_night_key
    ):
        """Re-rating without notes keeps the notes already stored."""
        vm = make_view_model(closed_night_key)

        await vm.set_sleep_quality(SleepQuality.OK, "noisy street")
        await vm.set_sleep_quality(SleepQuality.EXCELLENT)

        night = dao.get(closed_night_key)
        assert night.sleep_quality is SleepQuality.EXCELLENT
        assert night.notes == "noisy street"

    @pytest.mark.asyncio
    async def test_invalid_rating_raises(self, make_view_model, dao, closed_night_key):
        """Ratings outside 0..5 are refused before any work starts."""
        vm = make_view_model(closed_night_key)

        with pytest.raises(ValueError):
            vm.set_sleep_quality(6)

        assert vm.pending_tasks == 0
        assert dao.calls == ["insert"]
        assert vm.navigate_to_sleep_tracker.value is False

    @pytest.mark.asyncio
    async def test_missing_night_still_navigates(self, make_view_model, dao, caplog):
        """Rating a night that was cleared meanwhile only returns to the tracker."""
        vm = make_view_model(999)

        with caplog.at_level(logging.WARNING):
            await vm.set_sleep_quality(SleepQuality.POOR)

        assert "update" not in dao.calls
        assert vm.navigate_to_sleep_tracker.value is True
        assert "no longer exists" in caplog.text

    @pytest.mark.asyncio
    async def test_rating_notifies_history_observers(self, make_view_model, dao, closed_night_key):
        """Saving a rating refreshes observers of the night list."""
        received = []
        dao.observe_all_nights(received.append)
        vm = make_view_model(closed_night_key)

        await vm.set_sleep_quality(SleepQuality.SO_SO)

        assert received[-1][0].sleep_quality is SleepQuality.SO_SO

    @pytest.mark.asyncio
    async def test_acknowledge_navigation(self, make_view_model, closed_night_key):
        """Acknowledging resets the event, repeatedly."""
        vm = make_view_model(closed_night_key)
        await vm.set_sleep_quality(SleepQuality.OK)

        vm.acknowledge_navigation()
        assert vm.navigate_to_sleep_tracker.value is False

        vm.acknowledge_navigation()
        assert vm.navigate_to_sleep_tracker.value is False
