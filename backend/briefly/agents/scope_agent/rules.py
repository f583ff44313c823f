"""Scope decision rules: deterministic, no model, no randomness.

Small decisions the templates delegate to: stack picks from the preferred
stack label, the payment integration line, and client reference parsing.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .schema import BusinessLookalike

# ── Tech stack ────────────────────────────────────────────────────────

REACT_FRONTEND = (
    "React 18+ with TypeScript, Redux Toolkit for state management, TanStack Query "
    "for data fetching, Styled Components with Tailwind CSS, Vitest for testing, "
    "Vite for build system"
)
VUE_FRONTEND = (
    "Vue 3 with Composition API, Pinia for state management, TypeScript, Vitest "
    "for testing, Tailwind CSS for styling, Vite for build system"
)
NODE_BACKEND = (
    "Node.js 20+ with Express.js/NestJS, TypeScript, Prisma ORM, Jest for testing, "
    "Swagger for API documentation"
)
DJANGO_BACKEND = (
    "Django 4+ with Django REST Framework, PostgreSQL, Celery for async tasks, "
    "pytest for testing"
)


def decide_frontend(preferred_stack: str) -> str:
    """React when the stack label mentions React (case-sensitive), else Vue."""
    return REACT_FRONTEND if "React" in (preferred_stack or "") else VUE_FRONTEND


def decide_backend(preferred_stack: str) -> str:
    """Node when the stack label mentions Node (case-sensitive), else Django."""
    return NODE_BACKEND if "Node" in (preferred_stack or "") else DJANGO_BACKEND


# ── Integrations ──────────────────────────────────────────────────────

def decide_payment_integration(project_goal: str) -> str:
    if "payment" in (project_goal or "").lower():
        return "Payment gateway (Stripe/PayPal) with 3D Secure support"
    return "Potential payment integration if required in future phases"


# ── Client references ─────────────────────────────────────────────────

_PROTOCOL_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)


def split_references(references: str) -> List[str]:
    """Split the comma-separated references field, dropping blank entries."""
    return [ref.strip() for ref in (references or "").split(",") if ref.strip()]


def parse_reference_name(reference: str) -> str:
    """Derive a pseudo business name from a site name or URL.

    'https://www.airbnb.com/rooms' -> 'Airbnb', 'Rover.com' -> 'Rover'.
    Falls back to the trimmed reference when nothing is left after stripping.
    """
    ref = reference.strip()
    host = _WWW_RE.sub("", _PROTOCOL_RE.sub("", ref))
    root = host.split("/", 1)[0].split(".", 1)[0]
    if not root:
        return ref
    return root[0].upper() + root[1:]


def reference_url(reference: str) -> str:
    ref = reference.strip()
    if _PROTOCOL_RE.match(ref):
        return ref
    return f"https://{ref}"


_REFERENCE_NOTE = (
    "Client-provided reference. Review their onboarding flow, information "
    "architecture and conversion points; the proposed product should match their "
    "baseline experience while differentiating on the client's main selling point."
)
_REFERENCE_KEY_FEATURES: Tuple[str, ...] = (
    "Streamlined onboarding and account creation",
    "Clear value proposition on the landing experience",
    "Responsive layout across mobile and desktop",
    "Search and discovery of core content",
)
_REFERENCE_TECH_IMPLEMENTATION = (
    "Modern single-page frontend backed by a REST/GraphQL API, CDN-served assets "
    "and third-party analytics; to be confirmed during discovery."
)

PLACEHOLDER_LOOKALIKES: Tuple[Tuple[str, str], ...] = (
    (
        "Similar Business 1",
        "Market leader with comparable feature set. Key differentiators include their "
        "proprietary recommendation algorithm, streamlined onboarding process that "
        "increases conversion rates by 30%, and integrated analytics dashboard that "
        "provides actionable business intelligence.",
    ),
    (
        "Similar Business 2",
        "Competitor with innovative approach to user engagement through gamification "
        "elements and social features. Their mobile app implements progressive loading "
        "techniques that reduce initial load time by 40% compared to competitors, "
        "creating a more responsive UX.",
    ),
    (
        "Similar Business 3",
        "Niche player focusing on specific industry vertical with customized workflows "
        "and domain-specific tools. Notable for their implementation of "
        "industry-specific compliance features and integration with specialized "
        "third-party services relevant to their target market.",
    ),
)


def decide_generic_lookalikes(references: str) -> Tuple[BusinessLookalike, ...]:
    """One entry per client reference, or the fixed placeholder trio when none."""
    refs = split_references(references)
    if not refs:
        return tuple(
            BusinessLookalike(name=name, note=note)
            for name, note in PLACEHOLDER_LOOKALIKES
        )

    return tuple(
        BusinessLookalike(
            name=f"{parse_reference_name(ref)} (Client Reference {index})",
            note=_REFERENCE_NOTE,
            url=reference_url(ref),
            key_features=_REFERENCE_KEY_FEATURES,
            tech_implementation=_REFERENCE_TECH_IMPLEMENTATION,
        )
        for index, ref in enumerate(refs, start=1)
    )
