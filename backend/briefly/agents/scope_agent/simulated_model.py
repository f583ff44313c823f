"""Stand-in for the scope model call.

There is no inference here: the "analysis" is a trace line built from the
brief, printed so the pipeline logs look like a real model invocation. A real
integration would replace `run_simulated_model` and raise GenerationFailure
when the model returns nothing usable.
"""

from __future__ import annotations

from .schema import ClientInput


def build_model_context(client_input: ClientInput) -> str:
    """Context string handed to the model alongside the description."""
    preferences = client_input.preferred_stack or "None specified"
    return f"Project goal: {client_input.project_goal}, Tech preferences: {preferences}"


def run_simulated_model(text: str, context: str) -> str:
    """Return the simulated "enhanced analysis" of `text` and emit its trace."""
    print(f"🧠 [SCOPE] Using simulated local AI model to process: {text[:50]}...")
    analysis = (
        f'Enhanced analysis of "{text[:30]}..." '
        f'based on context: "{context[:30]}..."'
    )
    print(f"🧠 [SCOPE] Enhanced analysis: {analysis}")
    return analysis
