from __future__ import annotations

import asyncio
import logging
from typing import Any

from director_agent.agent.bindings import Bindings, build_bindings
from director_agent.agent.graph import build_director_graph
from director_agent.common.config import Settings

logger = logging.getLogger("director_agent")

_bindings: Bindings | None = None
_director_graph: Any | None = None
_lock = asyncio.Lock()


async def get_bindings() -> Bindings:
    """
    Lazily build and cache the environment bindings from Settings.from_env().
    """
    global _bindings
    if _bindings is not None:
        return _bindings

    async with _lock:
        if _bindings is None:
            settings = Settings.from_env()
            _bindings = build_bindings(settings)
            logger.info(
                "bindings_ready backend=%s ai=%s router_model=%s agent_model=%s",
                settings.ai_backend,
                _bindings.ai is not None,
                settings.router_model,
                settings.agent_model,
            )
        return _bindings


async def get_director_graph() -> Any:
    """
    Lazily build and cache the classify -> dispatch graph.
    """
    global _director_graph
    if _director_graph is not None:
        return _director_graph

    async with _lock:
        if _director_graph is None:
            _director_graph = build_director_graph()
        return _director_graph
