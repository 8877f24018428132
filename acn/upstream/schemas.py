"""Pydantic models for the upstream proxy endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..catalog.schemas import CamelModel


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    success: bool = True
    reply: str


class AnimalPage(CamelModel):
    data: List[Any] = Field(default_factory=list)
    total_count: Any = 0
    page: int
    size: int


class AnimalPageResponse(BaseModel):
    success: bool = True
    data: AnimalPage
