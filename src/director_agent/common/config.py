from __future__ import annotations

import os
from dataclasses import dataclass


AI_BACKENDS = ("openai", "mock", "none")


@dataclass(frozen=True)
class Settings:
    ai_backend: str = "openai"
    ai_api_key: str = ""
    ai_base_url: str = ""
    router_model: str = "gpt-4o-mini"
    agent_model: str = "gpt-4o-mini"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("AI_BACKEND", "openai").strip().lower()
        if backend not in AI_BACKENDS:
            raise ValueError(f"AI_BACKEND must be one of {', '.join(AI_BACKENDS)}, got {backend!r}")

        return cls(
            ai_backend=backend,
            ai_api_key=os.getenv("AI_API_KEY", ""),
            ai_base_url=os.getenv("AI_BASE_URL", ""),
            router_model=os.getenv("ROUTER_MODEL", cls.router_model),
            agent_model=os.getenv("AGENT_MODEL", cls.agent_model),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
        )
