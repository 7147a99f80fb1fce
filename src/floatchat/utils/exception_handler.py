import asyncio
import logging
import sys

logger = logging.getLogger("floatchat")


def global_exception_hook(exctype, value, tb):
    """
    Catches any uncaught exceptions in the application and logs them.
    Nothing is shown to the user; the window keeps running.
    """
    if issubclass(exctype, asyncio.CancelledError):
        logger.debug("[ExceptionHandler] Suppressing asyncio.CancelledError during shutdown.")
        return
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    logger.critical("An unexpected error occurred: %s", value, exc_info=(exctype, value, tb))


def setup_exception_hook():
    """Sets the global exception hook."""
    sys.excepthook = global_exception_hook
