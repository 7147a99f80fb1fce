from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QWidget, QHBoxLayout, QTextEdit, QFrame

from .components import Colors, Materials, Typography, IconButton

MIN_INPUT_HEIGHT = 36
MAX_INPUT_HEIGHT = 110


class _SubmitTextEdit(QTextEdit):
    """
    An internal QTextEdit that only accepts plain text.
    Return submits, Shift+Return inserts a newline.
    """
    submit_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptRichText(False)

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and \
                not (event.modifiers() & Qt.KeyboardModifier.ShiftModifier):
            self.submit_requested.emit()
            event.accept()
        else:
            super().keyPressEvent(event)


class ChatInput(QWidget):
    """The input bar: a growing text box and a send icon bound to the pending input."""
    text_edited = Signal(str)
    submit_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._update_send_enabled()

    def _setup_ui(self):
        self.setObjectName("input_bar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
            #input_bar {{
                background-color: {Materials.HEADER.css()};
                border-top: 1px solid {Colors.BORDER_DEFAULT.name()};
                border-bottom-left-radius: 16px;
                border-bottom-right-radius: 16px;
            }}
        """)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        input_frame = QFrame()
        input_frame.setObjectName("input_frame")
        input_frame.setStyleSheet(f"""
            #input_frame {{
                background-color: transparent;
                border-radius: 12px;
                border: 1px solid {Colors.INPUT_BORDER.name()};
            }}
        """)
        frame_layout = QHBoxLayout(input_frame)
        frame_layout.setContentsMargins(12, 2, 12, 2)

        self.text_input = _SubmitTextEdit()
        self.text_input.setPlaceholderText("Type a message...")
        self.text_input.setFont(Typography.body())
        self.text_input.setStyleSheet(
            f"border: none; background-color: transparent; color: {Colors.TEXT_PRIMARY.name()};")
        self.text_input.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.text_input.setFixedHeight(MIN_INPUT_HEIGHT)
        self.text_input.textChanged.connect(self._on_text_changed)
        self.text_input.submit_requested.connect(self._on_submit)
        frame_layout.addWidget(self.text_input)

        self.send_button = IconButton("fa5s.arrow-circle-up", 28, color=Colors.ACCENT_BLUE)
        self.send_button.setToolTip("Send")
        self.send_button.clicked.connect(self._on_submit)

        layout.addWidget(input_frame, 1)
        layout.addWidget(self.send_button, alignment=Qt.AlignmentFlag.AlignVCenter)

    def _on_text_changed(self):
        self._adjust_input_height()
        self._update_send_enabled()
        self.text_edited.emit(self.text_input.toPlainText())

    def _adjust_input_height(self):
        doc_height = self.text_input.document().size().height()
        new_height = max(MIN_INPUT_HEIGHT, min(int(doc_height) + 10, MAX_INPUT_HEIGHT))
        self.text_input.setFixedHeight(new_height)

    def _update_send_enabled(self):
        self.send_button.setEnabled(self.text() != "")

    def _on_submit(self):
        # Return fires even when the send icon is disabled.
        if self.send_button.isEnabled():
            self.submit_requested.emit()

    def text(self) -> str:
        return self.text_input.toPlainText()

    def set_text(self, text: str):
        """Mirrors the pending input without echoing it back as an edit."""
        if text == self.text():
            return
        self.text_input.blockSignals(True)
        self.text_input.setPlainText(text)
        self.text_input.blockSignals(False)
        cursor = self.text_input.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        self.text_input.setTextCursor(cursor)
        self._adjust_input_height()
        self._update_send_enabled()

    def focus_input(self):
        self.text_input.setFocus()
