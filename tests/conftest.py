from typing import Any, Dict, List, Tuple

import pytest

from director_agent.agent.bindings import Bindings


class ScriptedInference:
    """Fake capability: returns (or raises) the queued replies in order."""

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def run(self, model: str, inputs: Dict[str, Any]) -> Any:
        self.calls.append((model, inputs))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def make_env():
    def _make(*replies: Any) -> Bindings:
        return Bindings(ai=ScriptedInference(*replies), router_model="router-model", agent_model="agent-model")

    return _make
