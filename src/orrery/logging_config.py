"""
Logging configuration for the orrery.

This module provides a centralized configuration for the logging system.
It defines log levels, formatters, and handlers for the packages of the
orrery. Library modules only create loggers with ``logging.getLogger(__name__)``;
applications decide how records are emitted.

Usage:
    Call setup_logging() early in your application to configure the
    logging system:

    ```python
    from orrery.logging_config import setup_logging
    setup_logging()
    ```
"""

import logging
import logging.config
from pathlib import Path


def setup_logging(default_level=logging.INFO, log_dir="logs", console_level="INFO"):
    """
    Setup logging configuration for the orrery.

    Parameters
    ----------
    default_level : int, optional
        Level of the root logger. Default is logging.INFO.
    log_dir : str or Path, optional
        Directory to store log files, created if missing. Default is "logs".
    console_level : str, optional
        Level of the console handler. Default is "INFO".

    Returns
    -------
    None
        The function configures the logging system directly.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': console_level,
                'formatter': 'standard',
                'stream': 'ext://sys.stdout',
            },
            'file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'DEBUG',
                'formatter': 'detailed',
                'filename': str(log_path / 'orrery.log'),
                'maxBytes': 10485760,  # 10 MB
                'backupCount': 5,
                'encoding': 'utf8'
            },
            'error_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'ERROR',
                'formatter': 'detailed',
                'filename': str(log_path / 'error.log'),
                'maxBytes': 10485760,  # 10 MB
                'backupCount': 5,
                'encoding': 'utf8'
            },
        },
        'loggers': {
            '': {  # root logger
                'handlers': ['console', 'file', 'error_file'],
                'level': default_level,
                'propagate': True
            },
            'orrery.algorithms': {
                'handlers': ['console', 'file', 'error_file'],
                'level': 'DEBUG',
                'propagate': False
            },
            'orrery.models': {
                'handlers': ['console', 'file', 'error_file'],
                'level': 'DEBUG',
                'propagate': False
            },
            'orrery.utils': {
                'handlers': ['console', 'file'],
                'level': 'INFO',
                'propagate': False
            },
            'numba': {
                'level': 'WARNING',
            },
            'matplotlib': {
                'level': 'WARNING',
            },
        }
    }

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configuration applied")


if __name__ == "__main__":
    setup_logging()
