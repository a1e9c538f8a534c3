import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Global verbose flag, set by the command line tool
verbose_mode = False


def set_verbose_mode(verbose):
    """Set the global verbose mode flag."""
    global verbose_mode
    verbose_mode = verbose


def setup_logger():
    """
    Configure the root logger according to the global verbose setting.

    Log records go to stderr so they never mix with results printed on stdout.
    Calling this again after the verbose flag changed replaces the handler.

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    level = logging.DEBUG if verbose_mode else logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_modprime", False):
            if handler.level == level:
                return logger
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console_handler._modprime = True
    logger.addHandler(console_handler)
    return logger

