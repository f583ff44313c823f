"""Pydantic schemas for the scope API: request validation and responses."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ..agents.scope_agent.classifier import Archetype
from ..agents.scope_agent.schema import ClientInput, ScopeOutput
from ..constants import (
    MIN_CLIENT_NAME_LENGTH,
    MIN_DESCRIPTION_LENGTH,
    MIN_PROJECT_GOAL_LENGTH,
    MIN_SELLING_POINT_LENGTH,
    TECH_STACKS,
)


class ScopeRequest(BaseModel):
    """Client brief as submitted by the intake form.

    Accepts both camelCase (frontend) and snake_case keys.
    """

    client_name: str = Field(..., min_length=MIN_CLIENT_NAME_LENGTH, max_length=255)
    client_description: str = Field(
        ...,
        min_length=MIN_DESCRIPTION_LENGTH,
        max_length=5000,
        description="Describe what the client wants built. More detail gives a more accurate scope.",
    )
    references: Optional[str] = Field(
        default="",
        max_length=2000,
        description="Comma-separated reference sites, e.g. 'airbnb.com, rover.com'",
    )
    selling_point: str = Field(..., min_length=MIN_SELLING_POINT_LENGTH, max_length=1000)
    project_goal: str = Field(..., min_length=MIN_PROJECT_GOAL_LENGTH, max_length=1000)
    preferred_stack: Optional[str] = Field(
        default="", description="One of the labels returned by GET /scope/stacks, or empty"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "clientName": "ABC Marketing Agency",
                "clientDescription": "A marketplace where pet owners book trusted local pet sitting and boarding.",
                "references": "rover.com, wag.com",
                "sellingPoint": "Verified sitters with live updates",
                "projectGoal": "Launch an MVP with online payments",
                "preferredStack": "React + Node.js",
            }
        }

    @field_validator("preferred_stack")
    @classmethod
    def stack_is_known(cls, v: Optional[str]) -> str:
        v = (v or "").strip()
        if v and v not in TECH_STACKS:
            raise ValueError(f"Unknown preferred stack '{v}'. Valid stacks: {TECH_STACKS}")
        return v

    @field_validator("references")
    @classmethod
    def references_default_empty(cls, v: Optional[str]) -> str:
        return (v or "").strip()

    def to_client_input(self) -> ClientInput:
        return ClientInput(
            client_name=self.client_name,
            client_description=self.client_description,
            references=self.references or "",
            selling_point=self.selling_point,
            project_goal=self.project_goal,
            preferred_stack=self.preferred_stack or "",
        )


class ScopeResponse(BaseModel):
    """Response returned by POST /scope/generate."""

    success: bool = True
    client_name: str
    archetype: Archetype = Field(..., description="Detected project archetype")
    scope: ScopeOutput
    generated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TechStackListResponse(BaseModel):
    stacks: List[str] = Field(default_factory=lambda: list(TECH_STACKS))
