from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from director_agent.agent.labels import LABEL_VALUES, Label

ROUTER_SYSTEM_PROMPT = f"You manage agents. Respond with one of: {', '.join(LABEL_VALUES)}."


@dataclass(frozen=True)
class AgentProfile:
    """Prompt material for one stub agent. `summary` is placeholder data, not a real backend."""

    label: Label
    role: str
    capabilities: Tuple[str, ...]
    summary_title: str
    summary: Tuple[str, ...]

    def system_prompt(self) -> str:
        lines = [f"You are a smart assistant {self.role}. You can:"]
        lines += [f"{i}. {cap}" for i, cap in enumerate(self.capabilities, start=1)]
        lines.append("")
        lines.append(f"Current {self.summary_title} summary:")
        lines += [f"- {row}" for row in self.summary]
        return "\n".join(lines)


def user_prompt(query: str) -> str:
    return f'Query: "{query}"'


PROFILES: Dict[Label, AgentProfile] = {
    Label.CALENDAR: AgentProfile(
        label=Label.CALENDAR,
        role="managing a calendar system",
        capabilities=(
            "Add events to the database.",
            "Sync events with Google Calendar.",
            "Answer questions about the calendar.",
        ),
        summary_title="calendar",
        summary=(
            "Date: 2024-01-01, City: New York, Event: New Year's Celebration",
            "Date: 2024-02-14, City: Los Angeles, Event: Valentine's Day Dinner",
        ),
    ),
    Label.FINANCIAL: AgentProfile(
        label=Label.FINANCIAL,
        role="managing the finances of a touring artist",
        capabilities=(
            "Record income and expenses.",
            "Summarize budgets per tour or per month.",
            "Answer questions about revenue, costs and payouts.",
        ),
        summary_title="financial",
        summary=(
            "Month: 2024-01, Revenue: $42,000, Expenses: $18,500, Net: $23,500",
            "Month: 2024-02, Revenue: $35,200, Expenses: $21,300, Net: $13,900",
            "Outstanding invoice: Venue deposit, Los Angeles, $4,000, due 2024-03-01",
        ),
    ),
    Label.AUDIENCE: AgentProfile(
        label=Label.AUDIENCE,
        role="analyzing an artist's audience",
        capabilities=(
            "Report audience demographics per city.",
            "Track ticket sales and social media growth.",
            "Answer questions about fans and engagement.",
        ),
        summary_title="audience",
        summary=(
            "City: New York, Tickets sold: 1,850, Top age group: 25-34",
            "City: Los Angeles, Tickets sold: 2,300, Top age group: 18-24",
            "Social followers: 128,000 (+4% this month)",
        ),
    ),
    Label.TOURING: AgentProfile(
        label=Label.TOURING,
        role="planning tours and logistics",
        capabilities=(
            "Plan tour routes and venues.",
            "Arrange travel and accommodation.",
            "Answer questions about upcoming and past tours.",
        ),
        summary_title="tour",
        summary=(
            "Leg: East Coast, Dates: 2024-04-02 to 2024-04-20, Shows: 9, Status: confirmed",
            "Leg: West Coast, Dates: 2024-05-05 to 2024-05-25, Shows: 11, Status: tentative",
        ),
    ),
}
