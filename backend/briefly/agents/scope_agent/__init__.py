# Scope agent package
from .classifier import Archetype, classify
from .errors import GenerationFailure, ScopeError, ValidationError
from .generator import (
    export_scope_document,
    generate_scope_with_archetype,
    generate_technical_scope,
)
from .schema import ClientInput, ScopeOutput

__all__ = [
    "Archetype",
    "classify",
    "ClientInput",
    "ScopeOutput",
    "ScopeError",
    "ValidationError",
    "GenerationFailure",
    "generate_scope_with_archetype",
    "generate_technical_scope",
    "export_scope_document",
]
