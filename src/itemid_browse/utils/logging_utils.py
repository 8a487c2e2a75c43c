"""
Centralized logging configuration for the item id parsers
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from itemid_browse.config.settings import LOG_DIR, LOG_LEVEL


class ApplicationLogger:
    def __init__(
        self,
        log_dir: Optional[Union[str, Path]] = LOG_DIR,
        logger_name: str = "itemid_browse",
        level: str = LOG_LEVEL,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        self.log_dir = Path(log_dir).expanduser() if log_dir else None
        self.logger_name = logger_name
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.logger = self._configure_logger()

    def _configure_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.logger_name)
        logger.handlers.clear()
        logger.setLevel(self.level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=self.log_dir / f"{self.logger_name}.log",
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        if name:
            return self.logger.getChild(name)
        return self.logger
