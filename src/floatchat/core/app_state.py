from dataclasses import dataclass
from enum import Enum, auto

from floatchat.core.messages import MessageStore


class SubmissionState(Enum):
    """
    Lifecycle of a single user submission. Each state is entered in order;
    the synthetic reply cannot fail, so there is no error state.
    """
    IDLE = auto()
    SUBMITTED = auto()        # User message appended, input cleared.
    REPLY_SCHEDULED = auto()  # Delayed reply timer is armed.
    REPLY_DELIVERED = auto()  # Assistant message appended.

    def successor(self) -> "SubmissionState":
        members = list(SubmissionState)
        index = members.index(self)
        if index + 1 >= len(members):
            raise ValueError(f"{self.name} is a terminal state.")
        return members[index + 1]


@dataclass
class ChatState:
    """
    Mutable UI state shared with the view layer.
    Only the ChatController writes to it.
    """
    store: MessageStore
    pending_input: str = ""
