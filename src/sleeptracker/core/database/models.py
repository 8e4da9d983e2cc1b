"""SQLAlchemy table definitions for the sleep database."""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class SleepNightRecord(Base):
    """Row of the nightly sleep table.

    Quality is stored as -1 when the night has not been rated yet.
    """

    __tablename__ = "daily_sleep_quality_table"

    night_id = Column(Integer, primary_key=True, autoincrement=True)
    start_time_milli = Column(Integer, nullable=False)
    end_time_milli = Column(Integer, nullable=False)
    quality_rating = Column(Integer, nullable=False, default=-1)
    notes = Column(Text, nullable=True)

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return (
            f"<SleepNightRecord id={self.night_id} start={self.start_time_milli} "
            f"end={self.end_time_milli} quality={self.quality_rating}>"
        )
