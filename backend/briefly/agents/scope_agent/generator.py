"""Scope Generator Agent: canned technical scope from a client brief.

Validates the brief, waits once to mimic model latency, classifies the
description into an archetype and builds that archetype's template.
No real model calls and no randomness: identical input yields identical output.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Tuple

from ...config import get_simulated_latency
from ...constants import EXPORT_PLACEHOLDER_MESSAGE
from .classifier import Archetype, classify
from .errors import GenerationFailure, ValidationError
from .schema import ClientInput, ScopeOutput
from .simulated_model import build_model_context, run_simulated_model
from .templates import SCOPE_TEMPLATES

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]

_REQUIRED_FIELDS = ("client_name", "client_description", "selling_point", "project_goal")


def validate_client_input(client_input: ClientInput) -> None:
    """Raise ValidationError if any required field is blank."""
    missing = [
        name for name in _REQUIRED_FIELDS
        if not (getattr(client_input, name) or "").strip()
    ]
    if missing:
        raise ValidationError(missing)


async def generate_scope_with_archetype(
    client_input: ClientInput,
    *,
    latency_seconds: Optional[float] = None,
    sleep: Sleeper = asyncio.sleep,
) -> Tuple[Archetype, ScopeOutput]:
    """Generate the technical scope document and report which archetype built it.

    Parameters
    ----------
    client_input : ClientInput
        The brief submitted through the intake form.
    latency_seconds : float or None
        Simulated model latency. Read from SCOPE_SIMULATED_LATENCY_SECONDS if None.
    sleep : coroutine function
        Awaited exactly once with the latency; tests pass a no-op recorder.

    Raises
    ------
    ValidationError
        If client name, description, selling point or project goal is blank.
    GenerationFailure
        If no template is registered for the detected archetype.
    """
    validate_client_input(client_input)
    print(f"🧭 [SCOPE] Generating technical scope for client={client_input.client_name}")
    start_time = time.perf_counter()

    latency = get_simulated_latency() if latency_seconds is None else max(0.0, latency_seconds)
    await sleep(latency)

    run_simulated_model(client_input.client_description, build_model_context(client_input))

    archetype = classify(client_input.client_description)
    print(f"🧭 [SCOPE] Detected archetype: {archetype.value} (simulated latency={latency:.1f}s)")

    builder = SCOPE_TEMPLATES.get(archetype)
    if builder is None:
        raise GenerationFailure(f"No scope template registered for archetype '{archetype.value}'")

    scope = builder(client_input)

    duration_ms = (time.perf_counter() - start_time) * 1000
    print(
        f"✅ [SCOPE] Scope generated in {duration_ms:.0f}ms: archetype={archetype.value}, "
        f"requirements={len(scope.functional_scope)}, "
        f"lookalikes={len(scope.business_lookalikes)}"
    )
    return archetype, scope


async def generate_technical_scope(
    client_input: ClientInput,
    *,
    latency_seconds: Optional[float] = None,
    sleep: Sleeper = asyncio.sleep,
) -> ScopeOutput:
    """Generate the technical scope document for a client brief.

    Same arguments and errors as `generate_scope_with_archetype`.
    """
    _, scope = await generate_scope_with_archetype(
        client_input, latency_seconds=latency_seconds, sleep=sleep
    )
    return scope


def export_scope_document() -> None:
    """Placeholder export. No document is produced yet."""
    logger.info("Export functionality would be implemented here")
    print(f"📄 [SCOPE] {EXPORT_PLACEHOLDER_MESSAGE}")
