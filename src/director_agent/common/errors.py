from __future__ import annotations

from typing import Iterable


class DirectorError(Exception):
    """Base class for errors raised by the director pipeline."""


class ConfigurationError(DirectorError):
    """A required binding (e.g. the AI capability) is missing."""


class InferenceResponseError(DirectorError):
    """The inference backend returned a payload with no usable text."""


class AgentNotFound(DirectorError):
    def __init__(self, agent_id: str) -> None:
        super().__init__(f'Agent with ID "{agent_id}" not found.')
        self.agent_id = agent_id


class InvalidAgentResponse(DirectorError):
    """Classification reply did not name any known agent.

    This is a client-facing error (HTTP 400), never retried.
    """

    def __init__(self, reply: str, expected: Iterable[str]) -> None:
        self.reply = reply
        self.expected = list(expected)
        super().__init__(f"Invalid agent response: {reply}. Expected one of: {', '.join(self.expected)}.")
