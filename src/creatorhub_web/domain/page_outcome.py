"""Decision steps of the footage detail page.

Each step is a pure function over what the previous network call told us. A step
returns a terminal ``PageOutcome`` or None when the flow may continue. Resource
absence is decided before session absence.
"""
from __future__ import annotations

from enum import Enum


class PageOutcome(str, Enum):
    NOT_FOUND = "not_found"
    LOGIN_REDIRECT = "login_redirect"
    RENDER = "render"


def after_resource_fetch(resource_found: bool, session_present: bool) -> PageOutcome | None:
    if not resource_found:
        return PageOutcome.NOT_FOUND
    if not session_present:
        return PageOutcome.LOGIN_REDIRECT
    return None


def after_token_issue(token_issued: bool) -> PageOutcome:
    return PageOutcome.RENDER if token_issued else PageOutcome.LOGIN_REDIRECT


def classify(resource_found: bool, session_present: bool, token_issued: bool) -> PageOutcome:
    """Full decision table, for callers that already know every input."""
    early = after_resource_fetch(resource_found, session_present)
    if early is not None:
        return early
    return after_token_issue(token_issued)
