"""Port deciding whether a caller is trusted with admin operations."""

from abc import ABC, abstractmethod


class AdminGate(ABC):
    """Binary trust check keyed on the caller's identity (its network origin)."""

    @abstractmethod
    async def is_admin(self, origin: str | None) -> bool:
        """Return True iff ``origin`` exactly matches a stored admin record."""
        ...
