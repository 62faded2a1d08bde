"""Logging setup"""
import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Configure console logging for the billsplit loggers."""
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
                'style': '{',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'verbose',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'loggers': {
            'billsplit': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
        },
    })
