import enum
import logging
import threading
import traceback
from dataclasses import dataclass, field
from typing import List, Optional

from .conversation import ConversationStore
from .errors import AndesError
from .models import InboundReply
from .request_builder import build_request

SNAP_TO_END = "snap_to_end"
FOCUS_INPUT = "focus_input"


class SendState(enum.Enum):
    IDLE = "idle"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SendOutcome:
    accepted: bool
    state: SendState
    reply: Optional[InboundReply] = None
    error: Optional[str] = None
    commands: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is SendState.SUCCEEDED


class SendController:
    """
    Runs one send cycle at a time against the chat client.

    The user turn is committed before the network call, so a failed send
    leaves the question in the history without an answer. Failures are
    logged and reported through the returned outcome; nothing is raised.
    """

    def __init__(self, store: ConversationStore, client, model: str):
        self.store = store
        self.client = client
        self.model = model
        self.state = SendState.IDLE
        self.last_error = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger("Andes.Controller")

    @property
    def busy(self) -> bool:
        return self.state is SendState.SENDING

    def send(self) -> SendOutcome:
        with self._lock:
            if self.state is SendState.SENDING:
                self.logger.warning("Send ignored: a request is already in flight")
                return SendOutcome(accepted=False, state=self.state)
            self.state = SendState.SENDING

            self.store.append_user_turn(self.store.pending_input)
            request = build_request(self.store.context, self.store.turns, self.model)
            self.store.set_pending_input("")
            self.last_error = None

        try:
            reply = self.client.chat(request)
        except AndesError as e:
            return self._fail(e)
        except Exception as e:
            self.logger.debug(traceback.format_exc())
            return self._fail(e)

        self.store.append_reply_turn(reply.message)
        self.logger.info(
            f"Reply from {reply.model}: {len(reply.message.content)} chars, "
            f"{reply.eval_count} tokens"
        )
        self.state = SendState.SUCCEEDED
        outcome = SendOutcome(
            accepted=True,
            state=self.state,
            reply=reply,
            commands=[SNAP_TO_END, FOCUS_INPUT],
        )
        self.state = SendState.IDLE
        return outcome

    def _fail(self, error) -> SendOutcome:
        self.logger.error(f"Send failed: {error}")
        self.last_error = str(error)
        self.state = SendState.FAILED
        outcome = SendOutcome(accepted=True, state=self.state, error=self.last_error)
        self.state = SendState.IDLE
        return outcome

    def clear(self) -> bool:
        with self._lock:
            if self.state is SendState.SENDING:
                self.logger.warning("Clear ignored: a request is in flight")
                return False
            self.store.clear()
            self.last_error = None
        return True

    def edit_context(self, text: str):
        self.store.set_context(text)

    def edit_input(self, text: str):
        self.store.set_pending_input(text)
