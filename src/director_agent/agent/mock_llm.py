from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional

from director_agent.agent.labels import Label
from director_agent.agent.prompts import ROUTER_SYSTEM_PROMPT

UNKNOWN_REPLY = "I don't understand"

# keyword patterns per label; the label with the most hits wins
_KEYWORDS: Dict[Label, List[str]] = {
    Label.CALENDAR: [r"\bcalendar", r"\bevents?\b", r"\bschedul", r"\bdates?\b", r"\bmeeting", r"\bappointment"],
    Label.FINANCIAL: [r"\bfinanc", r"\bbudget", r"\bmoney\b", r"\brevenue", r"\bexpens", r"\binvoice", r"\bcosts?\b"],
    Label.AUDIENCE: [r"\baudience", r"\bfans?\b", r"\bfollowers?\b", r"\bdemograph", r"\btickets?\b", r"\bengagement"],
    Label.TOURING: [r"\btour", r"\bvenues?\b", r"\btravel", r"\bflights?\b", r"\bhotels?\b", r"\blogistic"],
}


def _normalize_query(q: str) -> str:
    s = (q or "").casefold()
    s = re.sub(r"\s+", " ", s).strip()
    return s


def _message(messages: List[Mapping[str, Any]], role: str) -> str:
    for m in messages:
        if m.get("role") == role:
            return str(m.get("content", ""))
    return ""


class MockInference:
    """
    Offline inference capability with deterministic replies.

    - routing prompt: answers with the label whose keywords occur most often in
      the user query (ties go to the earlier label), or UNKNOWN_REPLY.
    - any other prompt: echoes the query back in the direct {"response": ...} shape.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    async def run(self, model: str, inputs: Dict[str, Any]) -> Mapping[str, Any]:
        self.calls.append({"model": model, "inputs": inputs})
        messages = inputs.get("messages", [])
        system = _message(messages, "system")
        user = _message(messages, "user")

        if system == ROUTER_SYSTEM_PROMPT:
            label = self.classify(user)
            return {"response": label.value if label else UNKNOWN_REPLY}

        first_line = system.splitlines()[0] if system else "assistant"
        return {"response": f"[mock] {first_line} Received {user}"}

    def classify(self, query: str) -> Optional[Label]:
        q = _normalize_query(query)
        best: Optional[Label] = None
        best_hits = 0
        for label, patterns in _KEYWORDS.items():
            hits = sum(len(re.findall(p, q)) for p in patterns)
            if hits > best_hits:
                best, best_hits = label, hits
        return best
