"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class MetadataAttribute(BaseModel):
    trait_type: str
    value: str


class MetadataResponse(BaseModel):
    name: str
    description: str
    attributes: list[MetadataAttribute] = Field(default_factory=list)
    external_url: str = ""


class ErrorResponse(BaseModel):
    error: str
