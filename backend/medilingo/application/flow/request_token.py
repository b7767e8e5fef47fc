"""
Request Tokens

Every user action takes a token; starting a new action invalidates the
previous one so late collaborator results can be recognized and dropped.
"""

from dataclasses import dataclass
import itertools


@dataclass(frozen=True)
class RequestToken:
    """Token identifying one user action."""

    value: int
    action: str

    def __str__(self) -> str:
        return f"{self.action}#{self.value}"


class RequestTokenSource:
    """
    Issues tokens and remembers which one is current.

    Usage:
        token = tokens.issue("search")
        ...await collaborator...
        if not tokens.is_current(token):
            return  # superseded
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._current = 0

    def issue(self, action: str) -> RequestToken:
        """Create a token for a new action, invalidating the previous one."""
        self._current = next(self._counter)
        return RequestToken(value=self._current, action=action)

    def invalidate(self) -> None:
        """Invalidate the current token without starting an action."""
        self._current = next(self._counter)

    def is_current(self, token: RequestToken) -> bool:
        return token.value == self._current

    @property
    def current(self) -> int:
        return self._current
