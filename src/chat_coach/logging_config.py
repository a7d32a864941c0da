import logging
from logging.handlers import RotatingFileHandler

from . import config


def setup_logging():
    logger = logging.getLogger("coach")

    # Guard against duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter("%(asctime)s | %(name)s | %(levelname)s | %(message)s")

    # File handler, rotating, DEBUG level
    log_dir = config.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / "chat-coach.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Console handler, quiet unless CHAT_COACH_LOG_LEVEL says otherwise
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, config.CONSOLE_LOG_LEVEL, logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
