from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Union

from typing_extensions import TypedDict

from director_agent.agent.bindings import Bindings
from director_agent.agent.inference import build_request, decode_response, response_text
from director_agent.agent.labels import Label
from director_agent.agent.prompts import PROFILES, AgentProfile, user_prompt
from director_agent.agent.router import AI_NOT_CONFIGURED
from director_agent.common.errors import AgentNotFound

logger = logging.getLogger("agent.handlers")


class AgentReasoning(TypedDict):
    llmReasoning: str


class AgentError(TypedDict):
    error: str


AgentResult = Union[AgentReasoning, AgentError]
Handler = Callable[[Mapping[str, Any], Bindings], Awaitable[AgentResult]]


async def run_agent(profile: AgentProfile, payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    """Answer one query with the agent's prompt. Never raises: failures become AgentError."""
    name = f"{profile.label.value}Agent"
    if env.ai is None:
        logger.error("AI binding is missing or invalid. agent=%s", name)
        return {"error": AI_NOT_CONFIGURED}

    try:
        request = build_request(profile.system_prompt(), user_prompt(str(payload.get("query", ""))))
        raw = await env.ai.run(env.agent_model, request)
        text = response_text(decode_response(raw))

        logger.info("LLM Response agent=%s: %s", name, text)
        return {"llmReasoning": text}
    except Exception as e:
        logger.exception("Error in %s", name)
        return {"error": f"An error occurred: {e}"}


async def calendar_agent(payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    return await run_agent(PROFILES[Label.CALENDAR], payload, env)


async def financial_agent(payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    return await run_agent(PROFILES[Label.FINANCIAL], payload, env)


async def audience_agent(payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    return await run_agent(PROFILES[Label.AUDIENCE], payload, env)


async def touring_agent(payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    return await run_agent(PROFILES[Label.TOURING], payload, env)


AGENTS: Dict[Label, Handler] = {
    Label.CALENDAR: calendar_agent,
    Label.FINANCIAL: financial_agent,
    Label.AUDIENCE: audience_agent,
    Label.TOURING: touring_agent,
}


async def route_task(agent_id: str, payload: Mapping[str, Any], env: Bindings) -> AgentResult:
    try:
        agent = AGENTS[Label(agent_id)]
    except ValueError:
        raise AgentNotFound(agent_id) from None

    logger.info("Routing task to agent: %s", agent_id)
    return await agent(payload, env)
