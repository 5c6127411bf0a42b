"""
Logging configuration
"""

import logging
import logging.handlers

from pathlib import Path
from typing import Optional


APP_LOG_NAME = "scaffold_server.log"
ERROR_LOG_NAME = "scaffold_server_errors.log"
ACCESS_LOG_NAME = "scaffold_server_access.log"

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingConfig:
    """Logging configuration and management"""
    def __init__(self, logs_dir: str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        self.app_log_file = self.logs_dir / APP_LOG_NAME
        self.error_log_file = self.logs_dir / ERROR_LOG_NAME
        self.access_log_file = self.logs_dir / ACCESS_LOG_NAME

    def _rotating_handler(self, path: Path, level: int, max_mb: int, backups: int,
                          formatter: logging.Formatter) -> logging.Handler:
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backups,
            encoding='utf-8'
        )
        handler.setLevel(level)
        handler.setFormatter(formatter)
        return handler

    def setup_logging(self) -> logging.Logger:
        """Attach console, application, error and access handlers"""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        root_logger.addHandler(self._rotating_handler(self.app_log_file, logging.DEBUG, 10, 5, formatter))
        root_logger.addHandler(self._rotating_handler(self.error_log_file, logging.ERROR, 5, 3, formatter))

        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False
        for handler in access_logger.handlers[:]:
            access_logger.removeHandler(handler)
            handler.close()

        access_formatter = logging.Formatter(
            fmt='%(asctime)s | ACCESS | %(message)s',
            datefmt=DATE_FORMAT
        )
        access_logger.addHandler(
            self._rotating_handler(self.access_log_file, logging.INFO, 10, 5, access_formatter)
        )

        return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_access_entry(method: str, path: str, client: Optional[str] = None,
                        status_code: Optional[int] = None, response_time: Optional[float] = None,
                        error: Optional[str] = None) -> str:
    log_parts = [
        f"method={method}",
        f"path={path}",
        f"client={client or 'unknown'}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    return " | ".join(log_parts)


def log_api_access(method: str, path: str, client: Optional[str] = None,
                   status_code: Optional[int] = None, response_time: Optional[float] = None,
                   error: Optional[str] = None) -> None:
    logging.getLogger("access").info(
        format_access_entry(method, path, client, status_code, response_time, error)
    )
