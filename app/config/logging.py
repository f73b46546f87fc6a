"""
Logging configuration for the hotel management back end.
Provides structured logging with different handlers and formatters.
"""

import logging
import logging.config
import os
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from app.config.settings import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        """Add custom fields to the log record"""
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = settings.ENVIRONMENT

        if hasattr(record, 'request_id'):
            log_record['request_id'] = record.request_id

        if record.exc_info:
            log_record['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }


def build_logging_config() -> Dict[str, Any]:
    """Create the logging config dictionary from current settings"""
    console_formatter = 'colored' if settings.is_development() else 'standard'
    if settings.LOG_JSON:
        console_formatter = 'json'

    handlers: Dict[str, Any] = {
        'console': {
            'level': 'DEBUG' if settings.DEBUG else settings.LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': console_formatter,
            'filters': ['request_context'],
        },
    }

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers.update({
            'file': {
                'level': 'INFO',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': os.path.join(settings.LOG_DIR, 'app.log'),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 10,
                'formatter': 'standard',
                'filters': ['request_context'],
                'encoding': 'utf8'
            },
            'error_file': {
                'level': 'ERROR',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': os.path.join(settings.LOG_DIR, 'error.log'),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 10,
                'formatter': 'standard',
                'filters': ['request_context'],
                'encoding': 'utf8'
            },
            'json_file': {
                'level': 'INFO',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': os.path.join(settings.LOG_DIR, 'app.json.log'),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 10,
                'formatter': 'json',
                'filters': ['request_context'],
                'encoding': 'utf8'
            },
        })

    handler_names = list(handlers.keys())

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'request_context': {
                '()': 'app.core.logging.RequestContextFilter',
            },
        },
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s'
            },
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(timestamp)s %(level)s %(logger)s %(message)s'
            },
            'colored': {
                '()': 'colorlog.ColoredFormatter',
                'format': '%(log_color)s%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s',
                'log_colors': {
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            }
        },
        'handlers': handlers,
        'loggers': {
            '': {  # Root logger
                'handlers': handler_names,
                'level': settings.LOG_LEVEL,
            },
            'app': {  # Application logger
                'handlers': handler_names,
                'level': settings.LOG_LEVEL,
                'propagate': False
            },
            'sqlalchemy.engine': {  # SQL query logger
                'handlers': ['console'],
                'level': 'INFO' if settings.DB_ECHO else 'WARNING',
                'propagate': False
            },
            'uvicorn.access': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False
            }
        }
    }


def setup_logging() -> logging.Logger:
    """Configure application logging"""
    logging.config.dictConfig(build_logging_config())
    logger = logging.getLogger("app")
    logger.info(f"Logging initialized with level: {settings.LOG_LEVEL}")
    return logger
