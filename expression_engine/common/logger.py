"""Package-wide logger."""
import logging


def get_logger(name: str = "expression_engine") -> logging.Logger:
    """
    Return the package logger, attaching a stderr handler on first use.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)

    # Prevent double handlers when the module is imported more than once
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        log.addHandler(handler)
        log.setLevel(logging.WARNING)

    log.propagate = False
    return log


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between DEBUG and WARNING."""
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


logger = get_logger()
