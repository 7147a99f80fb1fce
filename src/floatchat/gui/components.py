import qtawesome as qta
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import QPushButton, QWidget


class Colors:
    """
    Palette for the floating window. Translucent backgrounds let the
    desktop show through the frosted backing.
    """
    TEXT_PRIMARY = QColor("#f0f6fc")
    TEXT_SECONDARY = QColor("#8b949e")
    TEXT_ON_ACCENT = QColor("#ffffff")

    BORDER_DEFAULT = QColor("#404040")  # Dark grey, matches an unfocused window
    BORDER_FOCUSED = QColor("#6e7681")
    INPUT_BORDER = QColor("#404040")

    ACCENT_BLUE = QColor("#0a84ff")  # User bubbles and the active send icon
    ACCENT_GREEN = QColor("#30d158")  # Online dot
    DISABLED = QColor("#6e6e73")

    NEUTRAL_BUBBLE = QColor(255, 255, 255, 26)  # ~10% white over the backing


class Material:
    """A hard-coded translucent fill standing in for a native blur material."""

    def __init__(self, name: str, tint: QColor):
        self.name = name
        self.tint = tint

    def css(self) -> str:
        return f"rgba({self.tint.red()}, {self.tint.green()}, {self.tint.blue()}, {self.tint.alpha()})"


class Materials:
    """The only two visual materials the app uses."""
    HUD_WINDOW = Material("hud_window", QColor(28, 28, 30, 215))  # Window backing
    HEADER = Material("header", QColor(44, 44, 46, 150))  # Header and input bars


class Typography:
    """A central place for defining font styles."""

    @staticmethod
    def get_font(size=12, weight=QFont.Weight.Normal, family="Segoe UI"):
        return QFont(family, size, weight)

    @staticmethod
    def heading_small():
        return Typography.get_font(12, QFont.Weight.DemiBold)

    @staticmethod
    def body():
        return Typography.get_font(11, QFont.Weight.Normal)

    @staticmethod
    def caption():
        return Typography.get_font(8, QFont.Weight.Normal)


class StatusIndicatorDot(QWidget):
    """A simple colored dot to indicate status."""

    def __init__(self, color: QColor = Colors.ACCENT_GREEN, diameter: int = 8, parent=None):
        super().__init__(parent)
        self.setFixedSize(diameter, diameter)
        self._color = color

    def color(self) -> QColor:
        return self._color

    def setColor(self, color: QColor):
        self._color = color
        self.update()  # Trigger a repaint

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._color)
        painter.drawEllipse(0, 0, self.width(), self.height())


class IconButton(QPushButton):
    """A flat, borderless button showing a single qtawesome glyph."""

    def __init__(self, icon_name: str, size: int, color: QColor = Colors.TEXT_SECONDARY,
                 disabled_color: QColor = Colors.DISABLED, parent=None):
        super().__init__(parent)
        self.setFixedSize(size + 4, size + 4)
        self.setIconSize(QSize(size, size))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setIcon(qta.icon(icon_name, color=color, color_disabled=disabled_color))
        self.setStyleSheet("""
            QPushButton { background-color: transparent; border: none; }
        """)
