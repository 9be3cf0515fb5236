from typing import Iterable

from .models import SYSTEM, OutboundRequest, Turn


def build_request(context: str, conversation: Iterable[Turn], model: str) -> OutboundRequest:
    """
    Build the message list for one send.

    The live context goes first as a synthetic system turn. System turns
    already sitting in the history are skipped so the model never sees two
    competing system instructions.
    """
    messages = []
    if context:
        messages.append(Turn(role=SYSTEM, content=context))
    messages.extend(turn for turn in conversation if turn.role != SYSTEM)
    return OutboundRequest(model=model, messages=messages, stream=False)
