"""
Diagnostics sink for resolution passes.

Every rejected or defaulted configuration value is recorded here as a
(message, context) pair. The engine only appends; the host decides when
to read, surface, or clear the log.

IMPORTANT: One sink per pass. Hosts running passes concurrently must give
each pass its own Diagnostics instance.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal notice about a rejected or defaulted value."""

    message: str
    context: Optional[Dict[str, Any]] = None


class Diagnostics:
    """Ordered, append-only log of diagnostics for one resolution pass."""

    def __init__(self) -> None:
        self._entries: List[Diagnostic] = []

    def add(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Append a diagnostic. Context is copied so callers may reuse dicts."""
        self._entries.append(Diagnostic(message, dict(context) if context else None))

    @property
    def entries(self) -> List[Diagnostic]:
        """Snapshot of the log, oldest first."""
        return list(self._entries)

    @property
    def messages(self) -> List[str]:
        return [d.message for d in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def drain(self) -> List[Diagnostic]:
        """Return all entries and empty the log."""
        entries = self.entries
        self.clear()
        return entries

    def emit_warnings(self, category: type = UserWarning) -> None:
        """Re-issue every entry through the warnings machinery."""
        for entry in self._entries:
            warnings.warn(entry.message, category, stacklevel=2)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)
