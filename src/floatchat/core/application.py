# src/floatchat/core/application.py
import logging
from typing import Callable, Optional

from floatchat.core.app_state import ChatState
from floatchat.core.chat_controller import ChatController, Scheduler
from floatchat.core.config import AppConfig
from floatchat.core.event_bus import EventBus
from floatchat.core.managers import WindowManager
from floatchat.core.messages import MessageStore

logger = logging.getLogger(__name__)


class Application:
    """
    Main application class that wires the store, controller and window together.
    """

    def __init__(self, config: AppConfig, scheduler: Optional[Scheduler] = None,
                 quit_callback: Optional[Callable[[], None]] = None):
        """
        Args:
            config: Runtime configuration.
            scheduler: Event loop used for the delayed replies (the qasync loop at runtime).
            quit_callback: Ends the process-level event loop once quit is confirmed.
        """
        self.config = config
        logger.info("[Application] Initializing '%s' (reply delay %.2fs)", config.title, config.reply_delay)

        self.event_bus = EventBus()
        self.state = ChatState(store=MessageStore(self.event_bus))
        self.controller = ChatController(self.state, self.event_bus, scheduler=scheduler,
                                         reply_delay=config.reply_delay, quit_callback=quit_callback)
        self.window_manager = WindowManager(self.event_bus)
        self._initialization_complete = False

    def initialize(self):
        self.window_manager.initialize_windows(self.state, self.controller, self.config.title)
        self.controller.start()
        self._initialization_complete = True
        logger.info("[Application] Initialization complete")

    def show(self):
        self.window_manager.show_main_window()

    def is_fully_initialized(self) -> bool:
        return self._initialization_complete and self.window_manager.is_fully_initialized()
