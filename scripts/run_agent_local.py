from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]   # project root
sys.path.insert(0, str(ROOT / "src"))        # make src importable without install

import asyncio
import json

from director_agent.agent.bindings import build_bindings
from director_agent.agent.graph import build_director_graph, run_director
from director_agent.common.config import Settings
from director_agent.common.errors import InvalidAgentResponse
from director_agent.common.logging_utils import setup_logging


async def main() -> int:
    setup_logging()
    query = " ".join(sys.argv[1:]).strip()
    if not query:
        query = "Hi, can you tell me all of the events I currently have in my calendar for this year?"

    bindings = build_bindings(Settings.from_env())
    graph = build_director_graph()

    try:
        result = await run_director(graph, query, bindings)
    except InvalidAgentResponse as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False, indent=2))
        return 1

    print(json.dumps({"agent": result["agent"], "response": result["response"]}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
