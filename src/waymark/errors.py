"""Waymark exception hierarchy.

Shared across Route, Router, and the CLI so every module raises and
catches the same types. "No route matched" is not an error: ``Router.match``
returns ``None`` for that.
"""

from enum import Enum


class RoutingErrorReason(Enum):
    """Why a routing operation was rejected."""

    INVALID_CATCH_ALL = "invalid_catch_all"
    PARAMETER_COUNT_MISMATCH = "parameter_count_mismatch"
    PARAMETER_NAME_MISMATCH = "parameter_name_mismatch"
    ROUTE_NOT_FOUND = "route_not_found"
    PARAMETER_NOT_IN_URL = "parameter_not_in_url"
    INVALID_HANDLER = "invalid_handler"
    EMPTY_METHODS = "empty_methods"
    DUPLICATE_PARAMETER = "duplicate_parameter"
    DUPLICATE_NAME = "duplicate_name"
    DUPLICATE_ROUTE = "duplicate_route"
    ROUTER_FROZEN = "router_frozen"


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """Raised when configuration or CLI input is invalid."""


class RoutingError(WaymarkError):
    """A route could not be registered, bound, or turned into a URL.

    ``reason`` tells callers which rule was broken without parsing the
    message::

        try:
            router.build_url("missing")
        except RoutingError as exc:
            if exc.reason is RoutingErrorReason.ROUTE_NOT_FOUND:
                ...
    """

    def __init__(self, reason: RoutingErrorReason, detail: str = "") -> None:
        super().__init__(reason, detail)
        self.reason = reason
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason.value}: {self.detail}"
        return self.reason.value
