"""Logging configuration"""
import logging
import sys

from config.settings import get_settings

# Configure logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "telemetry_server"

LOG_LEVEL = get_settings().log_level.upper()

# Configure root logger (console only, no file)
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Create logger for application
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(LOG_LEVEL)


def set_log_level(level: str):
    """Apply a per-app level (create_app may get settings other than the environment's)"""
    logger.setLevel(level.upper())
