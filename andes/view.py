from dataclasses import dataclass
from typing import Any, Dict, Optional

from .conversation import ConversationStore


@dataclass(frozen=True)
class ViewConfig:
    """Widget addressing and static labels, fixed for the life of a window."""

    scroll_id: str = "scrollable"
    input_id: str = "user_input"
    context_id: str = "context"
    title: str = "Andes"
    logo: str = "andes.svg"
    context_placeholder: str = "Context... "
    input_placeholder: str = "Message..."


def render(
    store: ConversationStore,
    config: ViewConfig,
    busy: bool = False,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """Project the current chat state onto the tree the page draws."""
    turns = [turn.to_dict() for turn in store.turns]

    placeholder = None
    if not turns:
        placeholder = {"logo": config.logo, "title": config.title}

    status = None
    if error:
        status = {"kind": "error", "message": error}

    return {
        "scroll_id": config.scroll_id,
        "placeholder": placeholder,
        "turns": turns,
        "context": {
            "id": config.context_id,
            "placeholder": config.context_placeholder,
            "value": store.context,
        },
        "input": {
            "id": config.input_id,
            "placeholder": config.input_placeholder,
            "value": store.pending_input,
            "disabled": busy,
        },
        "send": {"label": "Send", "disabled": busy},
        "clear": {"label": "Clear", "disabled": busy},
        "status": status,
    }
