import asyncio

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from director_agent.agent.inference import (
    ChoiceText,
    DirectText,
    LangChainInference,
    NoText,
    build_request,
    decode_response,
    raw_reply_text,
    response_text,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"response": "hi"}, DirectText("hi")),
        ({"response": "hi", "choices": [{"message": {"content": "other"}}]}, DirectText("hi")),
        ({"response": "", "choices": [{"message": {"content": " other "}}]}, ChoiceText("other")),
        ({"choices": [{"message": {"content": "   "}}]}, NoText()),
        ({"choices": [{"message": {}}]}, NoText()),
        ({"choices": []}, NoText()),
        ({}, NoText()),
        (None, NoText()),
        ("plain string", NoText()),
    ],
)
def test_decode_response_priority(raw, expected):
    assert decode_response(raw) == expected


def test_response_text_fallback():
    assert response_text(NoText()) == "No valid response from LLM."
    assert response_text(NoText(), fallback="-") == "-"
    assert response_text(ChoiceText("x")) == "x"


def test_build_request_is_fresh_each_call():
    a = build_request("sys", "user")
    b = build_request("sys", "user")
    assert a == b
    assert a["messages"] is not b["messages"]
    assert a["stream"] is False


def test_langchain_inference_returns_choice_shape():
    built = []

    def factory(model):
        built.append(model)
        return FakeListChatModel(responses=["first", "second"])

    ai = LangChainInference(factory)
    r1 = asyncio.run(ai.run("m1", build_request("sys", "hello")))
    r2 = asyncio.run(ai.run("m1", build_request("sys", "again")))

    assert r1 == {"choices": [{"message": {"role": "assistant", "content": "first"}}]}
    assert decode_response(r2) == ChoiceText("second")
    assert built == ["m1"]


def test_langchain_inference_rejects_streaming():
    ai = LangChainInference(lambda model: FakeListChatModel(responses=["x"]))
    with pytest.raises(ValueError):
        asyncio.run(ai.run("m", {"messages": [], "stream": True}))


def test_langchain_inference_rejects_unknown_role():
    ai = LangChainInference(lambda model: FakeListChatModel(responses=["x"]))
    with pytest.raises(ValueError, match="tool"):
        asyncio.run(ai.run("m", {"messages": [{"role": "tool", "content": "x"}], "stream": False}))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"response": " calendar "}, " calendar "),
        ({"response": "", "choices": [{"message": {"content": "  "}}]}, "  "),
        ({"choices": [{"message": {"content": 3}}]}, None),
        ({}, None),
        (None, None),
    ],
)
def test_raw_reply_text_keeps_blank_text(raw, expected):
    assert raw_reply_text(raw) == expected
