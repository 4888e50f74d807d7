"""Configuration settings for atomi-fit."""

import logging
import os
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings:
    """Application settings, read from the environment."""

    data_dir: Path = DEFAULT_DATA_DIR
    week_start: int = 1
    log_level: int = logging.WARNING

    def __init__(self):
        data_dir = os.getenv("ATOMI_FIT_DATA_DIR")
        if data_dir:
            self.data_dir = Path(data_dir).expanduser()

        # ISO weekday the calendar starts on: 1 = Monday ... 7 = Sunday
        week_start = os.getenv("ATOMI_FIT_WEEK_START", "1")
        if week_start.isdigit() and 1 <= int(week_start) <= 7:
            self.week_start = int(week_start)

        level = logging.getLevelName(os.getenv("ATOMI_FIT_LOG_LEVEL", "WARNING").upper())
        if isinstance(level, int):
            self.log_level = level


settings = Settings()
