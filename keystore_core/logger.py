import logging, json, sys, time, os

from .config import load_settings


def get_logger(name="keystore_core", level=None, to_file=None):
    """Structured logger shared by keystore_core modules.

    ``level`` and ``to_file`` fall back to KEYSTORE_LOG_LEVEL / KEYSTORE_LOG_FILE.
    """
    # Never fail at import time over a bad KEYSTORE_LOG_LEVEL
    settings = load_settings(strict=False)
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else settings.log_level)

    if not logger.handlers:
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or settings.log_file
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
