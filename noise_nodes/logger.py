import logging
import sys

# Centralized logger name
LOGGER_NAME = "NoiseNodes"

def get_logger() -> logging.Logger:
    """Get the standard logger for Noise Nodes."""
    return logging.getLogger(LOGGER_NAME)

def setup_logger(level=logging.INFO):
    """
    Configure the Noise Nodes logger.

    Package modules log through ``logging.getLogger(__name__)``; the
    ``noise_nodes`` logger is routed to the same handler so their records
    share the format below.

    Args:
        level: Logging level (default: INFO)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to prevent duplicates
    if logger.handlers:
        logger.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)

    # Format: [NoiseNodes] [Level] Message
    formatter = logging.Formatter(f'[{LOGGER_NAME}] [%(levelname)s] %(message)s')
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    package_logger = logging.getLogger("noise_nodes")
    package_logger.setLevel(level)
    if ch not in package_logger.handlers:
        package_logger.handlers.clear()
        package_logger.addHandler(ch)
    package_logger.propagate = False

    return logger

def log_info(msg: str):
    get_logger().info(msg)

def log_warning(msg: str):
    get_logger().warning(msg)

def log_error(msg: str):
    get_logger().error(msg)

def log_debug(msg: str):
    get_logger().debug(msg)
