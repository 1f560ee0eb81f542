import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def configure_logging(log_dir: str, debug: bool = False) -> logging.Logger:
    """Attach file and console handlers to the ``fishfindr`` logger."""
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, 'fishfindr.log')

    formatter = logging.Formatter(LOG_FORMAT)
    logger = logging.getLogger('fishfindr')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = RotatingFileHandler(log_path, maxBytes=10 * 1024 * 1024, backupCount=5)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
