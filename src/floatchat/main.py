import asyncio
import logging
import sys
from pathlib import Path

import qasync
from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication, QMessageBox

from floatchat.core.application import Application
from floatchat.core.config import AppConfig
from floatchat.utils.exception_handler import setup_exception_hook
from floatchat.utils.logging_setup import configure_logging

logger = logging.getLogger("floatchat.main")


async def main_async_logic(app_instance: QApplication, config: AppConfig):
    """
    The main asynchronous coroutine for the application.
    Runs until the QApplication is about to quit.
    """
    shutdown_future = asyncio.get_running_loop().create_future()

    def on_about_to_quit():
        logger.info("[main] Application is about to quit.")
        if not shutdown_future.done():
            shutdown_future.set_result(True)

    app_instance.aboutToQuit.connect(on_about_to_quit)

    try:
        float_app = Application(config, scheduler=asyncio.get_running_loop(), quit_callback=app_instance.quit)
        float_app.initialize()
        float_app.show()
        logger.info("[main] Application ready and displayed.")
        await shutdown_future
    except Exception as e:
        logger.critical("[main] CRITICAL ERROR during application startup: %s", e, exc_info=True)
        try:
            QMessageBox.critical(None, "Startup Error", f"Failed to start FloatChat.\n\nError: {e}")
        except Exception as msg_e:
            logger.error("Could not show error message box: %s", msg_e)
    finally:
        logger.info("[main] Main async logic has finished. Exiting.")
        QTimer.singleShot(0, app_instance.quit)


def main():
    config = AppConfig.from_env(Path.cwd() / ".env")
    configure_logging(config.log_level, config.log_file)
    setup_exception_hook()

    app = QApplication(sys.argv)
    app.setApplicationName("FloatChat")
    app.setOrganizationName("FloatChat")
    # Closing the last window must not end the process; only a confirmed quit does.
    app.setQuitOnLastWindowClosed(False)

    qasync.run(main_async_logic(app, config))
    logger.info("[main] Application has exited cleanly.")


if __name__ == "__main__":
    main()
