"""Tests for launch geometry and the floating window chrome."""

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, QRect, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QWidget

from floatchat.core.config import AppConfig
from floatchat.core.application import Application
from floatchat.core.managers import centered_geometry, window_manager
from floatchat.core.managers.window_manager import primary_screen_rect
from floatchat.gui.floating_window import FloatingWindow


def test_geometry_is_centered_on_screen() -> None:
    assert centered_geometry(QRect(0, 0, 1920, 1080)) == QRect(810, 340, 300, 400)


def test_geometry_respects_screen_origin() -> None:
    assert centered_geometry(QRect(1920, 0, 1280, 800)) == QRect(1920 + 490, 200, 300, 400)


@pytest.mark.parametrize("screen", [None, QRect()])
def test_geometry_falls_back_without_screen(screen) -> None:
    assert centered_geometry(screen) == QRect(450, 200, 300, 400)


def test_window_is_frameless_and_floating(qapp) -> None:
    window = FloatingWindow(QWidget())
    flags = window.windowFlags()
    assert flags & Qt.WindowType.FramelessWindowHint
    assert flags & Qt.WindowType.WindowStaysOnTopHint
    assert window.testAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
    assert window.minimumWidth() == 300
    assert window.minimumHeight() == 400


def test_window_close_asks_before_closing(qapp) -> None:
    requests = []
    window = FloatingWindow(QWidget(), on_close_requested=lambda: requests.append(True))
    window.show()
    assert window.close() is False
    assert requests == [True]
    assert window.isVisible()

    window.allow_close()
    assert window.close() is True
    assert requests == [True]


def test_application_builds_one_window(qapp, scheduler) -> None:
    app = Application(AppConfig(title="Test"), scheduler=scheduler)
    app.initialize()
    assert app.is_fully_initialized()

    window = app.window_manager.get_main_window()
    assert window.width() == 300
    assert window.height() == 400
    assert app.window_manager.chat_view.title_label.text() == "Test"
    assert len(app.state.store) == 1


def test_confirmed_quit_lets_window_close(qapp, scheduler) -> None:
    quits = []
    app = Application(AppConfig(), scheduler=scheduler, quit_callback=lambda: quits.append(True))
    app.initialize()
    app.show()
    window = app.window_manager.get_main_window()

    app.controller.confirm_quit(True)
    assert quits == [True]
    assert window.close() is True


def test_window_is_centered_on_primary_screen(qapp, scheduler) -> None:
    app = Application(AppConfig(), scheduler=scheduler)
    app.initialize()
    window = app.window_manager.get_main_window()
    assert window.geometry() == centered_geometry(primary_screen_rect())


def test_window_uses_fallback_without_screen(qapp, scheduler, monkeypatch) -> None:
    monkeypatch.setattr(window_manager, "primary_screen_rect", lambda: None)
    app = Application(AppConfig(), scheduler=scheduler)
    app.initialize()
    assert app.window_manager.get_main_window().geometry() == QRect(450, 200, 300, 400)


def mouse_event(kind, local: QPoint, global_pos: QPoint, buttons=Qt.MouseButton.LeftButton) -> QMouseEvent:
    return QMouseEvent(kind, QPointF(local), QPointF(global_pos), Qt.MouseButton.LeftButton,
                       buttons, Qt.KeyboardModifier.NoModifier)


def test_dragging_background_moves_window(qapp) -> None:
    # Not shown, so there is no native window to hand the move to.
    window = FloatingWindow(QWidget())
    window.move(100, 100)
    assert window.windowHandle() is None

    window.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, QPoint(10, 10), QPoint(110, 110)))
    window.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, QPoint(60, 40), QPoint(160, 140)))
    assert window.pos() == QPoint(150, 130)

    window.mouseReleaseEvent(mouse_event(QEvent.Type.MouseButtonRelease, QPoint(60, 40), QPoint(160, 140),
                                         buttons=Qt.MouseButton.NoButton))
    window.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, QPoint(80, 80), QPoint(230, 210)))
    assert window.pos() == QPoint(150, 130)
