from __future__ import annotations

import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from director_agent.agent.bindings import Bindings
from director_agent.agent.handlers import route_task
from director_agent.agent.router import classify

logger = logging.getLogger("agent.graph")


class DirectorState(TypedDict, total=False):
    query: str
    agent: str
    response: Dict[str, Any]


def _env(config: RunnableConfig) -> Bindings:
    env = (config.get("configurable") or {}).get("env")
    if not isinstance(env, Bindings):
        raise TypeError("graph must be invoked with config={'configurable': {'env': Bindings}}")
    return env


def build_director_graph() -> Any:
    """
    classify -> dispatch, strictly sequential.

    Bindings are not captured here: each invocation passes its own through
    config["configurable"]["env"], see run_director().
    """

    async def classify_node(state: DirectorState, config: RunnableConfig) -> DirectorState:
        label = await classify(state.get("query", ""), _env(config))
        return {"agent": label.value}

    async def dispatch_node(state: DirectorState, config: RunnableConfig) -> DirectorState:
        query = state.get("query", "")
        result = await route_task(state["agent"], {"query": query}, _env(config))
        return {"response": dict(result)}

    builder = StateGraph(DirectorState)
    builder.add_node("classify", classify_node)
    builder.add_node("dispatch", dispatch_node)

    builder.add_edge(START, "classify")
    builder.add_edge("classify", "dispatch")
    builder.add_edge("dispatch", END)

    return builder.compile()


async def run_director(graph: Any, query: str, env: Bindings) -> DirectorState:
    return await graph.ainvoke({"query": query}, config={"configurable": {"env": env}})
