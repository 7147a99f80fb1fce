"""Shared fixtures: an offscreen QApplication and a manual clock scheduler."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from floatchat.core.app_state import ChatState
from floatchat.core.chat_controller import ChatController
from floatchat.core.event_bus import EventBus
from floatchat.core.messages import MessageStore


class FakeTimer:
    def __init__(self, due: float, callback, args):
        self.due = due
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Stands in for the event loop's call_later; time only moves on advance()."""

    def __init__(self):
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay, callback, *args):
        timer = FakeTimer(self.now + delay, callback, args)
        self.timers.append(timer)
        return timer

    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.fired and not t.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for timer in sorted(self.pending(), key=lambda t: t.due):
            if timer.due <= self.now:
                timer.fired = True
                timer.callback(*timer.args)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def state(event_bus) -> ChatState:
    return ChatState(store=MessageStore(event_bus))


@pytest.fixture
def quit_calls() -> list:
    return []


@pytest.fixture
def controller(state, event_bus, scheduler, quit_calls) -> ChatController:
    return ChatController(state, event_bus, scheduler=scheduler, reply_delay=1.0,
                          quit_callback=lambda: quit_calls.append(True))
