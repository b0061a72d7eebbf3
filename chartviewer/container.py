"""A keyed registry of shared services."""

from __future__ import annotations

import logging
from functools import cache
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceNotFoundError(LookupError):
    """Raised when no service is registered under a key."""


class ServiceTypeError(TypeError):
    """Raised when a registered service is not of the requested type."""


class ServiceContainer:
    """Maps string keys to service objects."""

    def __init__(self) -> None:
        self._services: dict[str, Any] = {}

    def register(self, key: str, service: Any) -> None:
        """Register ``service`` under ``key``, replacing any earlier one."""
        self._services[key] = service
        logger.debug("Service registered: %s", key)

    def resolve(self, key: str, expected_type: type[T] = object) -> T:
        """Return the service under ``key``, checking it is an ``expected_type``."""
        try:
            service = self._services[key]
        except KeyError:
            raise ServiceNotFoundError(f"Service not found: {key}") from None
        if not isinstance(service, expected_type):
            raise ServiceTypeError(
                f"Service type mismatch for key: {key} "
                f"({type(service).__name__} is not {expected_type.__name__})"
            )
        return service


@cache
def default_container() -> ServiceContainer:
    """Return the application-wide container."""
    return ServiceContainer()