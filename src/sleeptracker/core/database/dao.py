"""Data access object for sleep nights.

``SleepDatabaseDao`` is the contract view models program against;
``SqlSleepDatabaseDao`` implements it on top of SQLAlchemy. Every method is
blocking and meant to be called off the UI thread.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine

from sleeptracker.core.database.engine import create_session_factory, init_db
from sleeptracker.core.database.models import SleepNightRecord
from sleeptracker.core.models import SleepNight, SleepQuality

logger = logging.getLogger(__name__)

NightsObserver = Callable[[List[SleepNight]], None]


class SleepDatabaseDao(ABC):
    """Store of sleep nights with a live "all nights" query."""

    def __init__(self) -> None:
        self._observers: list[NightsObserver] = []
        self._observers_lock = threading.Lock()

    @abstractmethod
    def insert(self, night: SleepNight) -> int:
        """Insert a new night.

        Args:
            night: Night to insert; its ``night_id`` is ignored

        Returns:
            Key assigned by the store
        """

    @abstractmethod
    def update(self, night: SleepNight) -> None:
        """Replace the stored night that has the same ``night_id``."""

    @abstractmethod
    def get(self, key: int) -> Optional[SleepNight]:
        """Get a night by key, or None if it does not exist."""

    @abstractmethod
    def get_tonight(self) -> Optional[SleepNight]:
        """Get the most recently created night, or None if the store is empty."""

    @abstractmethod
    def get_all_nights(self) -> List[SleepNight]:
        """Get all nights, most recently created first."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every night."""

    def observe_all_nights(self, observer: NightsObserver) -> None:
        """Register ``observer`` for the live list of all nights.

        The observer receives the current list immediately and a fresh list
        after every write, on the thread that performed the write.

        Args:
            observer: Callback receiving the list of nights
        """
        with self._observers_lock:
            self._observers.append(observer)
        observer(self.get_all_nights())

    def remove_observer(self, observer: NightsObserver) -> None:
        """Unregister an observer added with ``observe_all_nights``."""
        with self._observers_lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def _notify_observers(self) -> None:
        """Publish the current list of nights to all observers."""
        with self._observers_lock:
            observers = list(self._observers)
        if not observers:
            return

        nights = self.get_all_nights()
        for observer in observers:
            try:
                observer(nights)
            except Exception as e:
                logger.error(f"Error in nights observer: {e}", exc_info=True)


class SqlSleepDatabaseDao(SleepDatabaseDao):
    """SQLAlchemy implementation of ``SleepDatabaseDao``.

    Database access is serialized with a lock so the DAO can be shared by an
    executor's worker threads. Observers are notified before the lock is
    released, so snapshots reach them in write order. Observers must not
    block or write back to the DAO from another thread.
    """

    def __init__(self, engine: Engine):
        """Initialize the DAO and create the schema if needed.

        Args:
            engine: SQLAlchemy engine (see ``get_engine``)
        """
        super().__init__()
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._lock = threading.RLock()
        init_db(engine)
        logger.info(f"Sleep database opened: {engine.url}")

    def insert(self, night: SleepNight) -> int:
        with self._lock:
            with self._session_factory() as session:
                record = SleepNightRecord(
                    start_time_milli=night.start_time_milli,
                    end_time_milli=night.end_time_milli,
                    quality_rating=_quality_to_column(night.sleep_quality),
                    notes=night.notes,
                )
                session.add(record)
                session.commit()
                key = record.night_id
            logger.debug(f"Inserted night {key}")
            self._notify_observers()
        return key

    def update(self, night: SleepNight) -> None:
        with self._lock:
            with self._session_factory() as session:
                record = session.get(SleepNightRecord, night.night_id)
                if record is None:
                    logger.warning(f"Update ignored, night {night.night_id} not found")
                    return
                record.start_time_milli = night.start_time_milli
                record.end_time_milli = night.end_time_milli
                record.quality_rating = _quality_to_column(night.sleep_quality)
                record.notes = night.notes
                session.commit()
            logger.debug(f"Updated night {night.night_id}")
            self._notify_observers()

    def get(self, key: int) -> Optional[SleepNight]:
        with self._lock:
            with self._session_factory() as session:
                record = session.get(SleepNightRecord, key)
                return _to_night(record) if record is not None else None

    def get_tonight(self) -> Optional[SleepNight]:
        with self._lock:
            with self._session_factory() as session:
                record = session.scalars(
                    select(SleepNightRecord).order_by(SleepNightRecord.night_id.desc()).limit(1)
                ).first()
                return _to_night(record) if record is not None else None

    def get_all_nights(self) -> List[SleepNight]:
        with self._lock:
            with self._session_factory() as session:
                records = session.scalars(
                    select(SleepNightRecord).order_by(SleepNightRecord.night_id.desc())
                ).all()
                return [_to_night(record) for record in records]

    def clear(self) -> None:
        with self._lock:
            with self._session_factory() as session:
                session.execute(delete(SleepNightRecord))
                session.commit()
            logger.info("Cleared all nights")
            self._notify_observers()


def _quality_to_column(quality: Optional[SleepQuality]) -> int:
    return -1 if quality is None else int(quality)


def _to_night(record: SleepNightRecord) -> SleepNight:
    try:
        quality: Optional[SleepQuality] = SleepQuality(record.quality_rating)
    except ValueError:
        quality = None
    return SleepNight(
        night_id=record.night_id,
        start_time_milli=record.start_time_milli,
        end_time_milli=record.end_time_milli,
        sleep_quality=quality,
        notes=record.notes,
    )
