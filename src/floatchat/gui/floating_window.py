# src/floatchat/gui/floating_window.py
import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, QPoint, QRectF
from PySide6.QtGui import QCloseEvent, QColor, QMouseEvent, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget, QVBoxLayout

from .components import Colors, Materials

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 300
WINDOW_HEIGHT = 400
CORNER_RADIUS = 16
BORDER_WIDTH = 1


class FloatingWindow(QWidget):
    """
    A borderless, always-on-top window with rounded, frosted-glass chrome.
    There is no title bar: the window is moved by dragging its background.
    """

    def __init__(self, content: QWidget, on_close_requested: Optional[Callable[[], None]] = None):
        super().__init__(None, Qt.WindowType.Window | Qt.WindowType.FramelessWindowHint |
                         Qt.WindowType.WindowStaysOnTopHint)
        self.on_close_requested = on_close_requested
        self._drag_offset: Optional[QPoint] = None
        self._close_allowed = False

        self.setWindowTitle("FloatChat")
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setMinimumSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.content = content
        layout = QVBoxLayout(self)
        layout.setContentsMargins(BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH)
        layout.setSpacing(0)
        layout.addWidget(content)

    # --- Chrome ---
    def border_color(self) -> QColor:
        return Colors.BORDER_FOCUSED if self.isActiveWindow() else Colors.BORDER_DEFAULT

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        # Half-pixel inset keeps the 1px border crisp.
        rect = QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5)
        path = QPainterPath()
        path.addRoundedRect(rect, CORNER_RADIUS, CORNER_RADIUS)
        painter.fillPath(path, Materials.HUD_WINDOW.tint)
        painter.setPen(QPen(self.border_color(), BORDER_WIDTH))
        painter.drawPath(path)

    def changeEvent(self, event: QEvent):
        if event.type() == QEvent.Type.ActivationChange:
            self.update()
        super().changeEvent(event)

    # --- Drag to move ---
    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            handle = self.windowHandle()
            # Compositors like Wayland only allow moves the system starts itself.
            if handle is not None and handle.startSystemMove():
                event.accept()
                return
            self._drag_offset = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if event.buttons() & Qt.MouseButton.LeftButton and self._drag_offset is not None:
            self.move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_offset = None
        super().mouseReleaseEvent(event)

    # --- Lifecycle ---
    def show(self):
        super().show()
        self.activateWindow()
        self.raise_()

    def allow_close(self):
        self._close_allowed = True

    def closeEvent(self, event: QCloseEvent):
        """
        Closing from the OS (e.g. Alt+F4) goes through the same quit prompt
        as the close icon. The window only really closes once quit is confirmed.
        """
        if self._close_allowed:
            event.accept()
            return
        event.ignore()
        logger.debug("[FloatingWindow] Close requested; asking for confirmation.")
        if self.on_close_requested:
            self.on_close_requested()
