# Schemas package
from .scope_schema import ScopeRequest, ScopeResponse, TechStackListResponse

__all__ = [
    "ScopeRequest",
    "ScopeResponse",
    "TechStackListResponse",
]
