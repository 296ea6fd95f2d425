"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PreviewMessageModel(BaseModel):
    username: str = Field(..., description="Username shown in the label")
    text: str = Field(..., description="Message body")
    timestamp: int = Field(..., description="Unix seconds")
    color: str = Field(
        default="00FF00",
        pattern=r"^#?[0-9a-fA-F]{6}$",
        description="Hex label color, bare or with a leading #",
    )


class PreviewRequest(BaseModel):
    type: Literal["message", "feed"] = "message"
    username: str = "anon"
    text: str = "Hello, Public Terminal!"
    timestamp: int | None = Field(default=None, description="Unix seconds; defaults to now")
    messages: list[PreviewMessageModel] | None = Field(
        default=None,
        description="Feed messages, newest first; defaults to the sample feed",
    )
