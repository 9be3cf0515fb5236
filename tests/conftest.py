import json
from unittest.mock import MagicMock

import pytest

from andes.conversation import ConversationStore


def _reply_payload(content="ok", role="assistant", **overrides):
    payload = {
        "model": "llama2",
        "created_at": "2024-01-01T00:00:00Z",
        "message": {"role": role, "content": content},
        "done": True,
        "total_duration": 5000,
        "load_duration": 100,
        "prompt_eval_duration": 200,
        "eval_count": 12,
        "eval_duration": 3000,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def reply_payload():
    """Factory for well-formed /api/chat reply bodies."""
    return _reply_payload


@pytest.fixture
def store():
    return ConversationStore()


@pytest.fixture
def session():
    """A requests.Session stand-in answering with a well-formed reply."""
    session = MagicMock()
    session.post.return_value.status_code = 200
    session.post.return_value.text = json.dumps(_reply_payload())
    return session
