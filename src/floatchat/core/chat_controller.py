# src/floatchat/core/chat_controller.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

from floatchat.core.app_state import ChatState, SubmissionState
from floatchat.core.event_bus import EventBus
from floatchat.core.messages import Author, Message

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to FloatChat! I'm your AI assistant. How can I help you?"
REPLY_TEMPLATE = 'I received your message: "{text}". Anything else?'


def synthetic_reply(text: str) -> str:
    """The fixed-template reply for a submitted text. No model is involved."""
    return REPLY_TEMPLATE.format(text=text)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` shape, e.g. the qasync event loop."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


@dataclass
class Submission:
    """Tracks one user submission through to its synthetic reply."""
    user_message: Message
    state: SubmissionState = SubmissionState.IDLE
    handle: Optional[TimerHandle] = None
    reply: Optional[Message] = None

    def advance(self, new_state: SubmissionState):
        expected = self.state.successor()
        if new_state is not expected:
            raise RuntimeError(f"Cannot move submission from {self.state.name} to {new_state.name}.")
        self.state = new_state


class ChatController:
    """
    Mediates between the chat view and the message store.
    Single responsibility: turn user submissions into user messages and
    schedule the delayed synthetic reply on the UI thread.
    """

    def __init__(self, state: ChatState, event_bus: EventBus,
                 scheduler: Optional[Scheduler] = None, reply_delay: float = 1.0,
                 quit_callback: Optional[Callable[[], None]] = None):
        self.state = state
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.reply_delay = reply_delay
        self.quit_callback = quit_callback
        self.submissions: List[Submission] = []

    def start(self):
        """Greets the user. Called once when the window is first built."""
        self.state.store.append(Message.create(WELCOME_MESSAGE, Author.ASSISTANT))

    # --- Pending input ---
    def set_pending_input(self, text: str):
        if text == self.state.pending_input:
            return
        self.state.pending_input = text
        self.event_bus.emit("pending_input_changed", text)

    @property
    def can_send(self) -> bool:
        return self.state.pending_input != ""

    # --- Entry points ---
    def submit(self, text: Optional[str] = None) -> Optional[Submission]:
        """
        Appends the trimmed text as a user message and schedules the reply.
        Blank text is ignored and leaves all state untouched.
        """
        raw = self.state.pending_input if text is None else text
        cleaned = raw.strip()
        if not cleaned:
            return None

        scheduler = self._get_scheduler()
        submission = Submission(user_message=Message.create(cleaned, Author.USER))
        self.submissions.append(submission)

        self.state.store.append(submission.user_message)
        submission.advance(SubmissionState.SUBMITTED)
        self.set_pending_input("")

        submission.handle = scheduler.call_later(self.reply_delay, self._deliver_reply, submission)
        submission.advance(SubmissionState.REPLY_SCHEDULED)
        logger.info("[ChatController] Reply to %s scheduled in %.2fs", submission.user_message.id, self.reply_delay)
        return submission

    def confirm_quit(self, confirmed: bool):
        """Resolves the quit prompt. Cancelling changes nothing."""
        if not confirmed:
            logger.info("[ChatController] Quit cancelled.")
            return
        logger.info("[ChatController] Quit confirmed. Shutting down...")
        self.event_bus.emit("application_shutdown")
        if self.quit_callback:
            self.quit_callback()

    # --- Internals ---
    def _get_scheduler(self) -> Scheduler:
        if self.scheduler is None:
            # Raises RuntimeError outside a running loop, before any state changes.
            self.scheduler = asyncio.get_running_loop()
        return self.scheduler

    def _deliver_reply(self, submission: Submission):
        reply = Message.create(synthetic_reply(submission.user_message.text), Author.ASSISTANT)
        submission.reply = self.state.store.append(reply)
        submission.advance(SubmissionState.REPLY_DELIVERED)
        logger.info("[ChatController] Reply delivered for %s", submission.user_message.id)
