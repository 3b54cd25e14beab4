from __future__ import annotations

"""Loader collaborator interface and the transient font table.

The core never reads files or decodes assets itself. It receives a
:class:`ResourceLoader` from the host and treats every handle the loader
hands out as opaque.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

__all__ = ["ResourceLoader", "FontTable", "DEFAULT_FONT_KEY"]

DEFAULT_FONT_KEY = "default"


@runtime_checkable
class ResourceLoader(Protocol):
    """Protocol for the host-supplied loading collaborator."""

    def read_all_bytes(self) -> bytes:
        """Return the raw bytes of the document being loaded.

        Raises:
            OSError: If the bytes cannot be read
        """
        ...

    def load_resource(self, path: str) -> Any:
        """Return an opaque handle for the resource at *path*.

        Note:
            Handle issuance must not block; the host loads the actual bytes
            on its own schedule.
        """
        ...


@dataclass
class FontTable:
    """Font handles declared in a document head.

    Populated while scanning ``<font>`` declarations, consumed once by the
    resolution pass, then discarded.
    """

    fonts: Dict[str, Any] = field(default_factory=dict)
    default: Any = None

    def declare(self, name: Optional[str], handle: Any) -> None:
        """Record *handle* under *name*; ``None`` or ``"default"`` fills the default slot."""
        if name is None or name == DEFAULT_FONT_KEY:
            self.default = handle
        else:
            self.fonts[name] = handle

    def select(self, name: Optional[str] = None) -> Any:
        """Return the handle for *name*, falling back to the default font."""
        if name is not None and name in self.fonts:
            return self.fonts[name]
        return self.default

    def __len__(self) -> int:
        return len(self.fonts) + (1 if self.default is not None else 0)
