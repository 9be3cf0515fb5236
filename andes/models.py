import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import ReplyParseError

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"
ROLES = (SYSTEM, USER, ASSISTANT)


def _require(data: Dict[str, Any], key: str, kind, where: str):
    if key not in data:
        raise ReplyParseError(f"{where}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass, counters must not accept it
    if kind is int and isinstance(value, bool):
        raise ReplyParseError(f"{where}: field '{key}' must be int, got bool")
    if not isinstance(value, kind):
        raise ReplyParseError(
            f"{where}: field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Turn:
    """A single role-tagged message in the conversation."""

    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_dict(cls, data) -> "Turn":
        if not isinstance(data, dict):
            raise ReplyParseError(f"message must be an object, got {type(data).__name__}")
        return cls(
            role=_require(data, "role", str, "message"),
            content=_require(data, "content", str, "message"),
        )


@dataclass
class OutboundRequest:
    model: str
    messages: List[Turn] = field(default_factory=list)
    stream: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [turn.to_dict() for turn in self.messages],
            "stream": self.stream,
        }


@dataclass
class InboundReply:
    """
    A non-streaming /api/chat response.

    Every declared field is required. Only `message` is used by the
    controller, the rest is kept for diagnostics.
    """

    model: str
    created_at: str
    message: Turn
    done: bool
    total_duration: int
    load_duration: int
    prompt_eval_duration: int
    eval_count: int
    eval_duration: int

    COUNTERS = (
        "total_duration",
        "load_duration",
        "prompt_eval_duration",
        "eval_count",
        "eval_duration",
    )

    @classmethod
    def from_dict(cls, data) -> "InboundReply":
        if not isinstance(data, dict):
            raise ReplyParseError(f"reply must be an object, got {type(data).__name__}")

        counters = {}
        for name in cls.COUNTERS:
            value = _require(data, name, int, "reply")
            if value < 0:
                raise ReplyParseError(f"reply: field '{name}' must not be negative")
            counters[name] = value

        return cls(
            model=_require(data, "model", str, "reply"),
            created_at=_require(data, "created_at", str, "reply"),
            message=Turn.from_dict(_require(data, "message", dict, "reply")),
            done=_require(data, "done", bool, "reply"),
            **counters,
        )

    @classmethod
    def from_json(cls, text: str) -> "InboundReply":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ReplyParseError(f"reply is not valid JSON: {e}") from e
        return cls.from_dict(data)
