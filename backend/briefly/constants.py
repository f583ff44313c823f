"""Centralized constants shared by the scope agent and the API routes.

The stack labels and minimum field lengths mirror the client intake form
(frontend/src/components/ClientInputForm.tsx). Changes here must be mirrored
there.
"""

from __future__ import annotations

# ── Preferred tech stack options ────────────────────────────────────────
# Single-select. Empty string means "no preference".

TECH_STACKS: list[str] = [
    "React + Node.js",
    "Laravel + Vue",
    "Django + React",
    "MERN (MongoDB, Express, React, Node)",
    "MEAN (MongoDB, Express, Angular, Node)",
    "Ruby on Rails",
    "Flutter + Firebase",
    "React Native + Node.js",
    "WordPress",
    "Other/Custom",
]

# ── Intake form minimum lengths ─────────────────────────────────────────

MIN_CLIENT_NAME_LENGTH = 1
MIN_DESCRIPTION_LENGTH = 10
MIN_SELLING_POINT_LENGTH = 5
MIN_PROJECT_GOAL_LENGTH = 5

# ── Export placeholder ──────────────────────────────────────────────────

EXPORT_PLACEHOLDER_MESSAGE = (
    "Your scope document would be exported here in a real implementation."
)
