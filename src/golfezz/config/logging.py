"""Logging configuration utilities."""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path

from golfezz.config.logging_filters import CorrelationFilter
from golfezz.config.logging_filters import SensitiveDataFilter
from golfezz.config.types import AppConfig


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_timestamp: bool = True):
        """Initialize formatter.
        
        Args:
            include_timestamp: Whether to include timestamp in output
        """
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.
        
        Args:
            record: Log record to format
            
        Returns:
            JSON formatted string
        """
        data = {
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if self.include_timestamp:
            data['timestamp'] = datetime.fromtimestamp(record.created).isoformat()

        if record.exc_info:
            data['exception'] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            data.update(record.extra_fields)

        return json.dumps(data, default=str)

class ColoredFormatter(logging.Formatter):
    """Console formatter: one line per record, fields indented below it.

    Colors are used only when the stream is a terminal.
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool | None = None):
        super().__init__()
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')
        fields = dict(getattr(record, 'extra_fields', {}))
        cid = fields.pop('correlation_id', None)
        prefix = f"[{cid}] " if cid else ""
        
        line = f"{timestamp} {record.levelname:<7} {prefix}{record.name}: {record.getMessage()}"
        for key, value in fields.items():
            line += f"\n    {key}: {value}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        
        if not self.use_color:
            return line
        return f"{self.COLORS.get(record.levelname, '')}{line}{self.RESET}"

def get_console_handler(formatter: logging.Formatter, level: int) -> logging.StreamHandler:
    """Create console handler writing to stderr."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler

def get_file_handler(
    log_file: str | Path,
    formatter: logging.Formatter,
    max_bytes: int,
    backup_count: int
) -> logging.handlers.RotatingFileHandler:
    """Create rotating file handler.
    
    Args:
        log_file: Path to log file
        formatter: Formatter to use
        max_bytes: Maximum file size in bytes
        backup_count: Number of backup files to keep
        
    Returns:
        Configured file handler
    """
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count
    )
    file_handler.setFormatter(formatter)
    return file_handler

def setup_logging(config: AppConfig | None = None, verbose: bool = False, log_file: str | None = None) -> None:
    """Set up logging configuration."""
    logging_config = config.global_config['logging'] if config else None
    
    if verbose:
        level_name = logging_config['verbose_level'] if logging_config else 'DEBUG'
    else:
        level_name = config.log_level if config else 'WARNING'
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    
    sensitive_filter = SensitiveDataFilter()
    correlation_filter = CorrelationFilter()
    
    console_handler = get_console_handler(ColoredFormatter(), level)
    console_handler.addFilter(sensitive_filter)
    console_handler.addFilter(correlation_filter)
    root_logger.addHandler(console_handler)
    
    log_file = log_file or (config.log_file if config else None)
    if log_file:
        max_size = logging_config['max_size'] if logging_config else 10
        backup_count = logging_config['backup_count'] if logging_config else 5
        file_handler = get_file_handler(
            log_file,
            JsonFormatter(include_timestamp=True),
            max_size * 1024 * 1024,
            backup_count
        )
        # File handler always logs at DEBUG level for troubleshooting
        file_handler.setLevel(logging.DEBUG)
        file_handler.addFilter(sensitive_filter)
        file_handler.addFilter(correlation_filter)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
    
    # urllib3 is chatty at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)
