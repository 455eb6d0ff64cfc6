"""Ordered storage for declared menu items.

Nested structures (split panels, submenus) cannot be built while their parent
is still being declared, so the registry stores a ``PlaceholderToken`` at the
position where they were declared and keeps the nested builder in a side
table. At build time each token is swapped for the built value in place.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, Union

from .components import MenuItem

logger = logging.getLogger(__name__)


class PlaceholderKind(str, Enum):
    """What a placeholder stands in for."""

    SPLIT = "split"
    SUBMENU = "submenu"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlaceholderToken:
    """Stand-in for a nested structure that is not built yet.

    Attributes:
        kind: Split panel or submenu.
        key: Identifier the caller used for a submenu (None for split panels).
        id: Unique identifier of this declaration.
    """

    kind: PlaceholderKind
    key: str | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


Entry = Union[MenuItem, PlaceholderToken]


class ItemRegistry:
    """Declared items and placeholders, in declaration order."""

    def __init__(self):
        self._entries: list[Entry] = []
        self._builders: dict[PlaceholderToken, Any] = {}

    def add(self, item: MenuItem) -> None:
        self._entries.append(item)

    def reserve(self, kind: PlaceholderKind, builder: Any, key: str | None = None) -> PlaceholderToken:
        """Insert a placeholder for ``builder`` at the current position."""
        token = PlaceholderToken(kind=kind, key=key)
        self._entries.append(token)
        self._builders[token] = builder
        return token

    def entries(self) -> list[Entry]:
        """Copy of the declared entries."""
        return list(self._entries)

    def builder_for(self, token: PlaceholderToken) -> Any:
        return self._builders[token]

    def builders(self, kind: PlaceholderKind) -> Iterator[tuple[PlaceholderToken, Any]]:
        """Yield (token, builder) pairs of ``kind`` in declaration order."""
        for token, builder in self._builders.items():
            if token.kind == kind:
                yield token, builder

    def has_key(self, kind: PlaceholderKind, key: str) -> bool:
        return any(token.key == key for token, _ in self.builders(kind))

    def resolve(
        self,
        entries: list[Entry],
        kind: PlaceholderKind,
        build: Callable[[PlaceholderToken, Any], MenuItem],
    ) -> list[Entry]:
        """Replace every ``kind`` placeholder in ``entries`` with its built item.

        ``build`` is called once per placeholder with the token and the nested
        builder registered for it.
        """
        resolved: list[Entry] = []
        for entry in entries:
            if isinstance(entry, PlaceholderToken) and entry.kind == kind:
                logger.debug(f"Resolving {kind} placeholder {entry.id}")
                resolved.append(build(entry, self._builders[entry]))
            else:
                resolved.append(entry)
        return resolved

    def __len__(self) -> int:
        return len(self._entries)
