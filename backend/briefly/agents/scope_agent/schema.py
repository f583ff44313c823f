"""Scope agent input/output contract.

`ClientInput` is what the intake form submits; `ScopeOutput` is what the
output view renders. Both are immutable and serialise with the camelCase
field names the frontend uses (e.g. `clientDescription`, `techStack`).
Do NOT rename fields without updating frontend/src/components/OutputSection.tsx.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class _ScopeModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


# ── Input ────────────────────────────────────────────────────────────────

class ClientInput(_ScopeModel):
    """A single client brief, already validated by the intake form."""

    client_name: str = Field(..., description="Client or agency name")
    client_description: str = Field(..., description="Free-text project description")
    references: str = Field(
        default="", description="Comma-separated reference sites (names or URLs)"
    )
    selling_point: str = Field(..., description="Main selling point of the product")
    project_goal: str = Field(..., description="What the project must achieve")
    preferred_stack: str = Field(
        default="", description="One of constants.TECH_STACKS, or empty"
    )


# ── Output ───────────────────────────────────────────────────────────────

class TechStack(_ScopeModel):
    frontend: str
    backend: str
    database: str
    other: Optional[str] = None


class BusinessLookalike(_ScopeModel):
    """A comparable business used to contextualise the proposed product."""

    name: str
    note: str
    url: Optional[str] = None
    key_features: Optional[Tuple[str, ...]] = None
    tech_implementation: Optional[str] = None


class TimelinePhase(_ScopeModel):
    phase: str
    duration: str


class EstimatedTimeline(_ScopeModel):
    total: str
    breakdown: Tuple[TimelinePhase, ...]


class BackendFrontendTasks(_ScopeModel):
    backend: Tuple[str, ...]
    frontend: Tuple[str, ...]


class Sprint(_ScopeModel):
    sprint: str
    deliverables: Tuple[str, ...]


class ScopeOutput(_ScopeModel):
    """The complete technical scope document. Locked output schema."""

    functional_scope: Tuple[str, ...] = Field(..., description="Bullet requirements")
    tech_stack: TechStack
    integrations: Tuple[str, ...]
    third_party_tools: Tuple[str, ...]
    business_lookalikes: Tuple[BusinessLookalike, ...]
    estimated_timeline: EstimatedTimeline
    backend_frontend_tasks: BackendFrontendTasks
    sprint_breakdown: Tuple[Sprint, ...]
    scope_gap_warning: Optional[str] = Field(
        default=None, description="Gaps in the brief that risk scope creep"
    )
    client_friendly_brief: str = Field(
        ..., description="Plain-language summary for the client"
    )
