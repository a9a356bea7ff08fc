import logging
import sys

PACKAGE_LOGGER = "aws_sso_login"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the package logger to write to stderr.

    stdout is reserved for command output (shell exports, credential JSON),
    so every log record goes to stderr. Calling this more than once only
    updates the level.

    Args:
        level: Logging level for the package logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(getattr(h, "_aws_sso_login", False) for h in logger.handlers):
        formatter = logging.Formatter(LOG_FORMAT)

        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        ch._aws_sso_login = True

        logger.addHandler(ch)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def mask_string(secret: str, limit: int = 4) -> str:
    if len(secret) <= limit:
        return '*' * len(secret)
    return '*' * (len(secret) - limit) + secret[-limit:]
