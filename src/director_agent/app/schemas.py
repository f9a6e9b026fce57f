from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class RouteTaskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_query: Any = Field(default=None, alias="userQuery", description="User query in natural language")


class RouteTaskResponse(BaseModel):
    agent: str
    response: Dict[str, str]


class ErrorResponse(BaseModel):
    error: str


class DebugResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available_bindings: List[str] = Field(default_factory=list, alias="availableBindings")
    AI: str
