# src/floatchat/gui/chat_view.py
import logging
from datetime import datetime
from typing import Dict, Optional

from PySide6.QtCore import Qt, QTimer, QTime, QLocale, QPropertyAnimation, QEasingCurve
from PySide6.QtGui import QResizeEvent, QShowEvent
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QScrollArea, \
    QGraphicsOpacityEffect

from floatchat.core.app_state import ChatState
from floatchat.core.chat_controller import ChatController
from floatchat.core.event_bus import EventBus
from floatchat.core.messages import Author, Message
from floatchat.gui import quit_dialog
from floatchat.gui.chat_input import ChatInput
from floatchat.gui.components import Colors, Materials, Typography, StatusIndicatorDot, IconButton

logger = logging.getLogger(__name__)

SCROLL_ANIMATION_MS = 300
FADE_IN_MS = 250
INPUT_FOCUS_DELAY_MS = 500
BUBBLE_WIDTH_RATIO = 0.8


def format_timestamp(moment: datetime, locale: Optional[QLocale] = None) -> str:
    """Short, locale-formatted time of day, e.g. '14:05' or '2:05 PM'."""
    locale = locale or QLocale.system()
    return locale.toString(QTime(moment.hour, moment.minute, moment.second), QLocale.FormatType.ShortFormat)


class ChatBubble(QFrame):
    def __init__(self, text: str, background: str, text_color: str):
        super().__init__()
        self.setObjectName("chat_bubble")
        self.setStyleSheet(f"""
            #chat_bubble {{
                background-color: {background};
                border-radius: 12px;
            }}
        """)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        self.text_label = QLabel(text)
        self.text_label.setWordWrap(True)
        self.text_label.setTextFormat(Qt.TextFormat.PlainText)
        self.text_label.setFont(Typography.body())
        self.text_label.setStyleSheet(f"color: {text_color}; background: transparent;")
        layout.addWidget(self.text_label)

    def text(self) -> str:
        return self.text_label.text()


class ChatMessageWidget(QWidget):
    """One row of the list: a bubble with its time underneath, aligned by author."""

    def __init__(self, message: Message, background: str, text_color: str, alignment: Qt.AlignmentFlag):
        super().__init__()
        self.message = message
        self.alignment = alignment

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        column = QVBoxLayout()
        column.setSpacing(4)

        self.bubble = ChatBubble(message.text, background, text_color)
        self.time_label = QLabel(format_timestamp(message.created_at))
        self.time_label.setFont(Typography.caption())
        self.time_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY.name()};")

        column.addWidget(self.bubble, alignment=alignment)
        column.addWidget(self.time_label, alignment=alignment)

        if alignment == Qt.AlignmentFlag.AlignRight:
            row.addStretch()
            row.addLayout(column)
        else:
            row.addLayout(column)
            row.addStretch()

    def set_bubble_max_width(self, width: int):
        self.bubble.setMaximumWidth(width)


def render_message(message: Message) -> ChatMessageWidget:
    """Builds the row widget for a message. The author decides side and colour."""
    if message.author is Author.USER:
        return ChatMessageWidget(message, Colors.ACCENT_BLUE.name(), Colors.TEXT_ON_ACCENT.name(),
                                 Qt.AlignmentFlag.AlignRight)
    elif message.author is Author.ASSISTANT:
        neutral = Colors.NEUTRAL_BUBBLE
        background = f"rgba({neutral.red()}, {neutral.green()}, {neutral.blue()}, {neutral.alpha()})"
        return ChatMessageWidget(message, background, Colors.TEXT_PRIMARY.name(), Qt.AlignmentFlag.AlignLeft)
    raise ValueError(f"Unknown author: {message.author!r}")


class ChatView(QWidget):
    """
    The whole window content: header, scrolling message list and input bar.
    Reads the shared ChatState and forwards user intent to the ChatController.
    """

    def __init__(self, state: ChatState, controller: ChatController, event_bus: EventBus, title: str = "ChatGPT"):
        super().__init__()
        self.state = state
        self.controller = controller
        self.event_bus = event_bus
        self.message_widgets: Dict[str, ChatMessageWidget] = {}
        self.scroll_target_id: Optional[str] = None
        self._scroll_pending = False
        self._focus_scheduled = False

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header(title))

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setStyleSheet("""
            QScrollArea { border: none; background: transparent; }
            QScrollBar:vertical { width: 6px; background: transparent; }
            QScrollBar::handle:vertical { background: rgba(255, 255, 255, 60); border-radius: 3px; }
            QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical { height: 0; }
        """)
        self.scroll_area.viewport().setAutoFillBackground(False)
        self.bubble_container = QWidget()
        self.bubble_container.setStyleSheet("background: transparent;")
        self.bubble_layout = QVBoxLayout(self.bubble_container)
        self.bubble_layout.setContentsMargins(16, 12, 16, 12)
        self.bubble_layout.setSpacing(12)
        self.bubble_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.bubble_layout.addStretch()
        self.scroll_area.setWidget(self.bubble_container)
        main_layout.addWidget(self.scroll_area, 1)

        self.scroll_animation = QPropertyAnimation(self.scroll_area.verticalScrollBar(), b"value", self)
        self.scroll_animation.setDuration(SCROLL_ANIMATION_MS)
        self.scroll_animation.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self.scroll_window = QTimer(self)
        self.scroll_window.setSingleShot(True)
        self.scroll_window.setInterval(SCROLL_ANIMATION_MS)
        self.scroll_window.timeout.connect(self._disarm_scroll)

        self.input_widget = ChatInput()
        self.input_widget.text_edited.connect(self.controller.set_pending_input)
        self.input_widget.submit_requested.connect(self._on_submit_requested)
        main_layout.addWidget(self.input_widget)

        for message in self.state.store:
            self._add_message(message, animate=False)
        self.input_widget.set_text(self.state.pending_input)

        self._setup_event_subscriptions()

    def _create_header(self, title: str) -> QWidget:
        header = QWidget()
        header.setObjectName("header_bar")
        header.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        header.setStyleSheet(f"""
            #header_bar {{
                background-color: {Materials.HEADER.css()};
                border-top-left-radius: 16px;
                border-top-right-radius: 16px;
            }}
        """)
        layout = QHBoxLayout(header)
        layout.setContentsMargins(16, 12, 12, 12)
        layout.setSpacing(6)

        self.title_label = QLabel(title)
        self.title_label.setFont(Typography.heading_small())
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY.name()};")
        layout.addWidget(self.title_label)
        layout.addStretch()

        self.status_dot = StatusIndicatorDot(Colors.ACCENT_GREEN)
        layout.addWidget(self.status_dot, alignment=Qt.AlignmentFlag.AlignVCenter)
        self.status_label = QLabel("Online")
        self.status_label.setFont(Typography.caption())
        self.status_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY.name()};")
        layout.addWidget(self.status_label)
        layout.addSpacing(8)

        self.close_button = IconButton("fa5s.times-circle", 16)
        self.close_button.setToolTip("Quit application")
        self.close_button.clicked.connect(self.request_quit)
        layout.addWidget(self.close_button)
        return header

    def _setup_event_subscriptions(self):
        self.event_bus.subscribe("message_appended", self._on_message_appended)
        self.event_bus.subscribe("pending_input_changed", self.input_widget.set_text)
        self.scroll_area.verticalScrollBar().rangeChanged.connect(self._on_scroll_range_changed)

    # --- Messages ---
    def _on_message_appended(self, message: Message):
        self._add_message(message, animate=True)

    def _add_message(self, message: Message, animate: bool) -> ChatMessageWidget:
        widget = render_message(message)
        widget.set_bubble_max_width(self._bubble_max_width())
        # The trailing stretch stays last so rows pack at the top.
        self.bubble_layout.takeAt(self.bubble_layout.count() - 1)
        self.bubble_layout.addWidget(widget)
        self.bubble_layout.addStretch()
        self.message_widgets[message.id] = widget
        logger.debug("[ChatView] Rendered %s message %s", message.author.name, message.id)

        if animate:
            self._fade_in(widget)
        self.scroll_target_id = message.id
        self._scroll_pending = True
        self._scroll_to_newest()
        self.scroll_window.start()
        return widget

    def _fade_in(self, widget: QWidget):
        effect = QGraphicsOpacityEffect(widget)
        effect.setOpacity(0.0)
        widget.setGraphicsEffect(effect)
        fade = QPropertyAnimation(effect, b"opacity", widget)
        fade.setDuration(FADE_IN_MS)
        fade.setStartValue(0.0)
        fade.setEndValue(1.0)
        fade.setEasingCurve(QEasingCurve.Type.OutCubic)
        # The effect is only needed while fading.
        fade.finished.connect(lambda: widget.setGraphicsEffect(None))
        fade.start()

    # --- Scrolling ---
    def _scroll_to_newest(self):
        scroll_bar = self.scroll_area.verticalScrollBar()
        self._animate_scroll(scroll_bar.maximum())

    def _on_scroll_range_changed(self, min_val, max_val):
        # A freshly added row only grows the range once the layout has run, so
        # range changes follow the newest row only briefly after an append.
        # Other range changes (input growing, resizes) leave the position alone.
        if self._scroll_pending:
            self._animate_scroll(max_val)

    def _disarm_scroll(self):
        self._scroll_pending = False

    def _animate_scroll(self, target: int):
        scroll_bar = self.scroll_area.verticalScrollBar()
        if scroll_bar.value() == target:
            return
        self.scroll_animation.stop()
        self.scroll_animation.setStartValue(scroll_bar.value())
        self.scroll_animation.setEndValue(target)
        self.scroll_animation.start()

    def _bubble_max_width(self) -> int:
        return max(120, int(self.scroll_area.viewport().width() * BUBBLE_WIDTH_RATIO))

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        width = self._bubble_max_width()
        for widget in self.message_widgets.values():
            widget.set_bubble_max_width(width)

    def showEvent(self, event: QShowEvent):
        super().showEvent(event)
        if not self._focus_scheduled:
            self._focus_scheduled = True
            QTimer.singleShot(INPUT_FOCUS_DELAY_MS, self.input_widget.focus_input)

    # --- User intent ---
    def _on_submit_requested(self):
        self.controller.submit()
        self.input_widget.focus_input()

    def request_quit(self):
        """Close affordance: ask first, then let the controller decide."""
        confirmed = quit_dialog.ask_quit_confirmation(self.window())
        self.controller.confirm_quit(confirmed)
