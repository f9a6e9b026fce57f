from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from director_agent.agent.inference import InferenceCapability, LangChainInference, openai_chat_factory
from director_agent.agent.mock_llm import MockInference
from director_agent.common.config import Settings


@dataclass(frozen=True)
class Bindings:
    """Environment handed to the router and to every agent call."""

    ai: Optional[InferenceCapability] = None
    router_model: str = Settings.router_model
    agent_model: str = Settings.agent_model

    def available(self) -> List[str]:
        names = []
        if self.ai is not None:
            names.append("AI")
        names += ["ROUTER_MODEL", "AGENT_MODEL"]
        return names


def build_bindings(settings: Settings) -> Bindings:
    ai: Optional[InferenceCapability] = None
    if settings.ai_backend == "mock":
        ai = MockInference()
    elif settings.ai_backend == "openai" and settings.ai_api_key:
        ai = LangChainInference(openai_chat_factory(settings.ai_api_key, settings.ai_base_url))

    return Bindings(ai=ai, router_model=settings.router_model, agent_model=settings.agent_model)
