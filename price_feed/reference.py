"""
Price Feed - Reference Store Interface.

The pipeline reads currency display names through this protocol
only. The SQLAlchemy-backed CurrencyRepository satisfies it.
"""

from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class ReferenceStore(Protocol):
    """Read-only view of the currency code -> display name table."""

    def lookup(self, code: str) -> Optional[str]:
        """Display name for a code, or None if unknown."""
        ...

    def list_all(self) -> Sequence[Tuple[str, str]]:
        """All (code, display name) pairs."""
        ...


class InMemoryReferenceStore:
    """Dict-backed reference store, used by scripts and tests."""

    def __init__(self, entries: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._entries: Dict[str, str] = {}
        for code, name in entries or ():
            self._entries[code.upper()] = name

    def lookup(self, code: str) -> Optional[str]:
        return self._entries.get(code.upper())

    def list_all(self) -> List[Tuple[str, str]]:
        return list(self._entries.items())


def missing_name(code: str) -> str:
    """Placeholder display name for codes absent from the store."""
    return f"{code} (no display name)"
