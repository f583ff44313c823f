"""Project archetype classifier: keyword heuristic, no model.

`classify()` is the only entry point callers should use; the rule table can
be swapped for a real model without touching the generator.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Tuple


class Archetype(str, Enum):
    PET_CARE_MARKETPLACE = "pet_care_marketplace"
    GENERIC_WEB_APPLICATION = "generic_web_application"


def is_pet_care_marketplace(description: str) -> bool:
    """'pet' plus either 'boarding' or 'sitting', case-insensitive substrings."""
    text = description.lower()
    return "pet" in text and ("boarding" in text or "sitting" in text)


# Evaluated in order, first match wins.
ARCHETYPE_RULES: List[Tuple[Callable[[str], bool], Archetype]] = [
    (is_pet_care_marketplace, Archetype.PET_CARE_MARKETPLACE),
]

FALLBACK_ARCHETYPE = Archetype.GENERIC_WEB_APPLICATION


def classify(description: str) -> Archetype:
    """Map a free-text client description to a project archetype."""
    for predicate, archetype in ARCHETYPE_RULES:
        if predicate(description):
            return archetype
    return FALLBACK_ARCHETYPE
