"""
Centralized logging configuration for view export.

Features:
- Colored console output for development
- Structured JSON logging for production environments
- Optional rotating file handlers (off by default: the library writes nothing
  to disk unless LOG_TO_FILE is enabled)
- Correlation IDs for tracing a single export run
- Thread-safe singleton pattern

Log Naming Convention (when LOG_TO_FILE is enabled):
- viewexport_YYYYMMDD.log        - Application logs (INFO+)
- viewexport_error_YYYYMMDD.log  - Errors only (ERROR+)
"""

import logging
import logging.handlers
import json
import sys
import threading
import uuid
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional
from contextvars import ContextVar

# Context variable for correlation ID (one per export run)
correlation_id: ContextVar[str] = ContextVar('correlation_id', default='')

LOGGER_NAMESPACE = "viewexport"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "correlation_id": correlation_id.get(''),
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class EnterpriseFormatter(logging.Formatter):
    """Text formatter: TIMESTAMP | LEVEL | LOGGER | CORRELATION | MESSAGE."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        level = record.levelname.ljust(8)

        corr_id = correlation_id.get('')
        corr_str = f"[{corr_id[:8]}] " if corr_id else ""

        message = f"{timestamp} | {level} | {record.name:30s} | {corr_str}{record.getMessage()}"

        # Add location for DEBUG/ERROR
        if record.levelno <= logging.DEBUG or record.levelno >= logging.ERROR:
            message += f" ({record.filename}:{record.lineno})"

        if self.use_colors and hasattr(sys.stderr, 'isatty') and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, '')
            reset = self.COLORS['RESET']
            message = f"{color}{message}{reset}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


class ViewExportLogger:
    """Centralized logging configuration (singleton)."""

    _instance = None
    _lock = threading.Lock()
    _initialized = False

    APP_NAME = LOGGER_NAMESPACE

    LOG_FILES = {
        'app': '{app}_{date}.log',
        'error': '{app}_error_{date}.log',
    }

    # Rotation settings
    MAX_BYTES = 10 * 1024 * 1024  # 10 MB per file
    BACKUP_COUNT = 5

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._setup_logging()
                    ViewExportLogger._initialized = True

    def _get_log_path(self, log_dir: str, log_type: str) -> Path:
        """Get log file path with naming convention."""
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)

        date_str = datetime.now().strftime('%Y%m%d')
        filename = self.LOG_FILES[log_type].format(app=self.APP_NAME, date=date_str)
        return directory / filename

    def _setup_logging(self):
        """Attach handlers to the package logger namespace."""
        from view_export.config.settings import settings

        use_json = settings.APP_ENV in ('production', 'staging')
        file_formatter = JSONFormatter() if use_json else EnterpriseFormatter(use_colors=False)

        root = logging.getLogger(LOGGER_NAMESPACE)
        root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
        root.handlers.clear()
        root.propagate = False

        # Console goes to stderr so CLI output on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            JSONFormatter() if use_json else EnterpriseFormatter(use_colors=True)
        )
        root.addHandler(console_handler)

        if settings.LOG_TO_FILE:
            app_handler = logging.handlers.RotatingFileHandler(
                self._get_log_path(settings.LOG_DIR, 'app'),
                maxBytes=self.MAX_BYTES,
                backupCount=self.BACKUP_COUNT,
                encoding='utf-8'
            )
            app_handler.setLevel(logging.INFO)
            app_handler.setFormatter(file_formatter)
            root.addHandler(app_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                self._get_log_path(settings.LOG_DIR, 'error'),
                maxBytes=self.MAX_BYTES,
                backupCount=self.BACKUP_COUNT,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(file_formatter)
            root.addHandler(error_handler)

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a logger for a specific module."""
        ViewExportLogger()  # Ensure initialized
        if name.startswith(f"{LOGGER_NAMESPACE}.") or name == LOGGER_NAMESPACE:
            return logging.getLogger(name)
        return logging.getLogger(f'{LOGGER_NAMESPACE}.{name}')


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module."""
    return ViewExportLogger.get_logger(name)


def setup_logging(level: Optional[str] = None, verbose: bool = False):
    """Setup logging with optional level override."""
    ViewExportLogger()
    root = logging.getLogger(LOGGER_NAMESPACE)
    if level:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if verbose:
        for handler in root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.handlers.RotatingFileHandler
            ):
                handler.setLevel(logging.DEBUG)


def set_correlation_id(corr_id: Optional[str] = None) -> str:
    """Set correlation ID for an export run. Returns the ID."""
    new_id = corr_id or str(uuid.uuid4())
    correlation_id.set(new_id)
    return new_id


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id.get('')
