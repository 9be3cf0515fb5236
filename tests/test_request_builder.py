from andes.models import Turn
from andes.request_builder import build_request


def test_context_replaces_stored_system_turns():
    conversation = [Turn("user", "hi"), Turn("assistant", "hello"), Turn("system", "ignored")]

    request = build_request("be terse", conversation, "llama2")

    assert request.messages == [
        Turn("system", "be terse"),
        Turn("user", "hi"),
        Turn("assistant", "hello"),
    ]
    assert request.model == "llama2"
    assert request.stream is False


def test_no_context_means_no_system_turn():
    request = build_request("", [Turn("user", "hi")], "llama2")
    assert request.messages == [Turn("user", "hi")]


def test_empty_conversation_with_context():
    request = build_request("ctx", [], "m")
    assert request.messages == [Turn("system", "ctx")]


def test_wire_body():
    request = build_request("ctx", [Turn("user", "hi")], "llama2")
    assert request.to_dict() == {
        "model": "llama2",
        "messages": [
            {"role": "system", "content": "ctx"},
            {"role": "user", "content": "hi"},
        ],
        "stream": False,
    }
