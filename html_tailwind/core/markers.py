from __future__ import annotations

"""Marker registry: host capabilities attached to nodes by ``id``.

A host registers, per HTML ``id``, an ordered list of attachment descriptors.
Descriptors are plain data; after a tree is handed over, the host walks
:meth:`MarkerRegistry.attachments` and applies each descriptor with its own
dispatcher. The core never runs host code.
"""

from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from html_tailwind.core.models import Node
from html_tailwind.core.tree import NodeTree

__all__ = ["MarkerAttachment", "MarkerRegistry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerAttachment:
    """One capability to attach to the node carrying a given id.

    Attributes
    ----------
    capability
        Host-defined name of the capability (e.g. ``"exit-game"``).
    params
        Read-only parameters for the host's dispatcher.
    """

    capability: str
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


class MarkerRegistry:
    """Maps node ids to ordered lists of :class:`MarkerAttachment`."""

    def __init__(self) -> None:
        self._markers: Dict[str, List[MarkerAttachment]] = {}

    def register(self, html_id: str, capability: str, **params: Any) -> MarkerAttachment:
        """Append a *capability* attachment for nodes whose id is *html_id*."""
        if not html_id:
            raise ValueError("Marker id must be a non-empty string")
        attachment = MarkerAttachment(capability, MappingProxyType(dict(params)))
        self._markers.setdefault(html_id, []).append(attachment)
        logger.debug("Registered marker %r for id %r", capability, html_id)
        return attachment

    def unregister(self, html_id: str) -> None:
        self._markers.pop(html_id, None)

    def markers_for(self, html_id: str) -> Tuple[MarkerAttachment, ...]:
        return tuple(self._markers.get(html_id, ()))

    def attachments(self, tree: NodeTree) -> Iterator[Tuple[Node, MarkerAttachment]]:
        """Yield ``(node, attachment)`` pairs for *tree* in pre-order.

        Attachments for one node keep their registration order.
        """
        for node in tree.iter_nodes():
            if node.id is None:
                continue
            for attachment in self._markers.get(node.id, ()):
                yield node, attachment

    def __contains__(self, html_id: object) -> bool:
        return html_id in self._markers

    def __len__(self) -> int:
        return sum(len(items) for items in self._markers.values())
