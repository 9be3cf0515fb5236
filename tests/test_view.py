from andes.models import Turn
from andes.view import ViewConfig, render


def test_empty_conversation_shows_placeholder(store):
    view = render(store, ViewConfig())
    assert view["placeholder"] == {"logo": "andes.svg", "title": "Andes"}
    assert view["turns"] == []
    assert view["status"] is None


def test_turns_follow_conversation_order(store):
    store.append_user_turn("hi")
    store.append_reply_turn(Turn("assistant", "hello"))

    view = render(store, ViewConfig())

    assert view["placeholder"] is None
    assert view["turns"] == [
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "hello"},
    ]


def test_fields_reflect_context_and_draft(store):
    store.set_context("be terse")
    store.set_pending_input("typing")
    config = ViewConfig(input_id="msg", context_id="ctx", scroll_id="scroll")

    view = render(store, config)

    assert view["context"] == {"id": "ctx", "placeholder": "Context... ", "value": "be terse"}
    assert view["input"]["id"] == "msg"
    assert view["input"]["value"] == "typing"
    assert view["scroll_id"] == "scroll"


def test_busy_disables_send(store):
    view = render(store, ViewConfig(), busy=True)
    assert view["send"]["disabled"]
    assert view["input"]["disabled"]
    assert view["clear"]["disabled"]


def test_error_status(store):
    view = render(store, ViewConfig(), error="connection refused")
    assert view["status"] == {"kind": "error", "message": "connection refused"}
