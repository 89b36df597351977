"""Dependency injection for FastAPI endpoints"""

from typing import AbstractSet
from fastapi import Request
from instruction_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_supported_currencies() -> AbstractSet[str]:
    """Provide the configured set of accepted currency codes"""
    return frozenset(code.upper() for code in settings.supported_currencies)
