# src/floatchat/core/messages.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

from floatchat.core.event_bus import EventBus

logger = logging.getLogger(__name__)


class Author(Enum):
    """Who wrote a message. Rendering switches on this value."""
    USER = auto()
    ASSISTANT = auto()


@dataclass(frozen=True)
class Message:
    """A single chat message. Immutable once created; identity is the id."""

    text: str
    author: Author
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.text:
            raise ValueError("Message text must not be empty.")

    @classmethod
    def create(cls, text: str, author: Author) -> "Message":
        return cls(text=text, author=author)

    @property
    def is_user(self) -> bool:
        return self.author is Author.USER


class MessageStore:
    """
    Ordered, append-only log of the session's chat messages.
    Insertion order is chronological order. Nothing is ever persisted.
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        self.event_bus = event_bus
        self._messages: List[Message] = []

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        logger.debug("[MessageStore] Appended %s message %s (%d total)",
                     message.author.name, message.id, len(self._messages))
        if self.event_bus:
            self.event_bus.emit("message_appended", message)
        return message

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
