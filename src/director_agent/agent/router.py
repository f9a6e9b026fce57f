from __future__ import annotations

import logging

from director_agent.agent.bindings import Bindings
from director_agent.agent.inference import build_request, raw_reply_text
from director_agent.agent.labels import LABEL_VALUES, Label, find_label
from director_agent.agent.prompts import ROUTER_SYSTEM_PROMPT
from director_agent.common.errors import ConfigurationError, InferenceResponseError, InvalidAgentResponse

logger = logging.getLogger("agent.router")

AI_NOT_CONFIGURED = "AI binding is not configured correctly."


async def classify(query: str, env: Bindings) -> Label:
    """
    Ask the router model which agent should handle `query`.

    Raises:
        ConfigurationError: no AI binding (no call is made).
        InferenceResponseError: the reply carries no text in any known shape.
        InvalidAgentResponse: the reply text names none of the labels.
    """
    if env.ai is None:
        raise ConfigurationError(AI_NOT_CONFIGURED)

    request = build_request(ROUTER_SYSTEM_PROMPT, query)
    raw = await env.ai.run(env.router_model, request)

    text = raw_reply_text(raw)
    if text is None:
        raise InferenceResponseError(f"Router model returned no text: {raw!r}")

    label = find_label(text)
    if label is None:
        raise InvalidAgentResponse(text, LABEL_VALUES)

    logger.info("Routing to agent: %s", label.value)
    return label
