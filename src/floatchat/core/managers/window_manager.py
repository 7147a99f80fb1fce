# src/floatchat/core/managers/window_manager.py
import logging
from typing import Optional

from PySide6.QtCore import QRect
from PySide6.QtGui import QGuiApplication

from floatchat.core.app_state import ChatState
from floatchat.core.chat_controller import ChatController
from floatchat.core.event_bus import EventBus
from floatchat.gui.chat_view import ChatView
from floatchat.gui.floating_window import FloatingWindow, WINDOW_WIDTH, WINDOW_HEIGHT

logger = logging.getLogger(__name__)

FALLBACK_SCREEN = QRect(0, 0, 1200, 800)


def centered_geometry(screen_rect: Optional[QRect]) -> QRect:
    """
    The launch frame: a fixed-size window centered on the given screen.
    Without usable screen metrics the fallback frame is centered on instead.
    """
    if screen_rect is None or screen_rect.isEmpty():
        screen_rect = FALLBACK_SCREEN
    x = screen_rect.x() + (screen_rect.width() - WINDOW_WIDTH) // 2
    y = screen_rect.y() + (screen_rect.height() - WINDOW_HEIGHT) // 2
    return QRect(x, y, WINDOW_WIDTH, WINDOW_HEIGHT)


def primary_screen_rect() -> Optional[QRect]:
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        logger.warning("[WindowManager] No primary screen reported; using fallback geometry.")
        return None
    return screen.geometry()


class WindowManager:
    """
    Creates and manages the single floating window.
    Single responsibility: window lifecycle and access.
    """

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.main_window: Optional[FloatingWindow] = None
        self.chat_view: Optional[ChatView] = None
        self.event_bus.subscribe("application_shutdown", self._on_application_shutdown)
        logger.debug("[WindowManager] Initialized")

    def initialize_windows(self, state: ChatState, controller: ChatController, title: str = "ChatGPT"):
        logger.debug("[WindowManager] Initializing windows...")
        self.chat_view = ChatView(state, controller, self.event_bus, title)
        self.main_window = FloatingWindow(self.chat_view, on_close_requested=self.chat_view.request_quit)
        geometry = centered_geometry(primary_screen_rect())
        self.main_window.setGeometry(geometry)
        logger.info("[WindowManager] Floating window placed at %d,%d (%dx%d)",
                    geometry.x(), geometry.y(), geometry.width(), geometry.height())

    def get_main_window(self) -> Optional[FloatingWindow]:
        return self.main_window

    def show_main_window(self):
        if self.main_window: self.main_window.show()

    def _on_application_shutdown(self):
        if self.main_window:
            self.main_window.allow_close()

    def is_fully_initialized(self) -> bool:
        return all([self.main_window, self.chat_view])
