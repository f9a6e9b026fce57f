from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from typing_extensions import Protocol, TypedDict

logger = logging.getLogger("agent.inference")

NO_VALID_RESPONSE = "No valid response from LLM."


class ChatMessage(TypedDict):
    role: str
    content: str


class InferenceCapability(Protocol):
    """Anything that can answer a role-tagged message list with a model."""

    async def run(self, model: str, inputs: Dict[str, Any]) -> Mapping[str, Any]:
        ...


def build_request(system: str, user: str) -> Dict[str, Any]:
    """Build a fresh, non-streaming inference request."""
    messages: List[ChatMessage] = [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]
    return {"messages": messages, "stream": False}


# --- response decoding ---------------------------------------------------------
#
# Backends answer in one of two shapes:
#   {"response": "..."}                                   -> DirectText
#   {"choices": [{"message": {"content": "..."}}]}        -> ChoiceText (trimmed)
# Anything else decodes to NoText. Shapes are probed in that order.


@dataclass(frozen=True)
class DirectText:
    text: str


@dataclass(frozen=True)
class ChoiceText:
    text: str


@dataclass(frozen=True)
class NoText:
    pass


DecodedResponse = Union[DirectText, ChoiceText, NoText]


def _choice_content(raw: Mapping[str, Any]) -> Optional[str]:
    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, Mapping):
        return None
    message = first.get("message")
    if not isinstance(message, Mapping):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


def decode_response(raw: Any) -> DecodedResponse:
    if not isinstance(raw, Mapping):
        return NoText()

    direct = raw.get("response")
    if isinstance(direct, str) and direct:
        return DirectText(direct)

    content = _choice_content(raw)
    if content is not None and content.strip():
        return ChoiceText(content.strip())

    return NoText()


def raw_reply_text(raw: Any) -> Optional[str]:
    """Untrimmed reply text, same priority as decode_response.

    Blank text is returned as-is; None only when neither field holds a string.
    """
    if not isinstance(raw, Mapping):
        return None

    direct = raw.get("response")
    if isinstance(direct, str) and direct:
        return direct

    return _choice_content(raw)


def response_text(decoded: DecodedResponse, fallback: str = NO_VALID_RESPONSE) -> str:
    if isinstance(decoded, (DirectText, ChoiceText)):
        return decoded.text
    return fallback


# --- LangChain-backed capability -------------------------------------------------


def _content_to_text(content: Any) -> str:
    """LangChain message.content can be str OR list of parts; normalize to str."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for p in content:
            if isinstance(p, str):
                parts.append(p)
            elif isinstance(p, dict) and "text" in p:
                parts.append(str(p["text"]))
            else:
                parts.append(str(p))
        return " ".join(parts)
    return str(content)


def _to_langchain(messages: List[ChatMessage]) -> List[BaseMessage]:
    out: List[BaseMessage] = []
    for m in messages:
        role = m.get("role")
        content = m.get("content", "")
        if role == "system":
            out.append(SystemMessage(content=content))
        elif role == "user":
            out.append(HumanMessage(content=content))
        elif role == "assistant":
            out.append(AIMessage(content=content))
        else:
            raise ValueError(f"Unsupported message role: {role!r}")
    return out


ChatModelFactory = Callable[[str], BaseChatModel]


class LangChainInference:
    """Inference capability backed by a LangChain chat model.

    One chat model is created lazily per model id via `factory`.
    Replies are returned in the nested choices/message/content shape.
    """

    def __init__(self, factory: ChatModelFactory) -> None:
        self._factory = factory
        self._models: Dict[str, BaseChatModel] = {}

    def _model(self, model: str) -> BaseChatModel:
        llm = self._models.get(model)
        if llm is None:
            llm = self._factory(model)
            self._models[model] = llm
        return llm

    async def run(self, model: str, inputs: Dict[str, Any]) -> Mapping[str, Any]:
        if inputs.get("stream"):
            raise ValueError("Streaming inference is not supported")

        messages = _to_langchain(inputs.get("messages", []))
        reply = await self._model(model).ainvoke(messages)
        text = _content_to_text(reply.content)
        logger.debug("inference model=%s chars=%d", model, len(text))
        return {"choices": [{"message": {"role": "assistant", "content": text}}]}


def openai_chat_factory(api_key: str, base_url: str = "") -> ChatModelFactory:
    """Factory for any OpenAI-compatible chat completions endpoint."""
    from langchain_openai import ChatOpenAI

    def build(model: str) -> BaseChatModel:
        kwargs: Dict[str, Any] = {"model": model, "temperature": 0, "streaming": False, "api_key": api_key}
        if base_url:
            kwargs["base_url"] = base_url
        return ChatOpenAI(**kwargs)

    return build
