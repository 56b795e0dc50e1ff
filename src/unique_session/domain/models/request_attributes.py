"""Read-only view of the request attributes used for fingerprinting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _as_text(value: Any) -> str | None:
    if isinstance(value, bytes):
        return value.decode("latin1")
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


@dataclass(frozen=True)
class RequestAttributes:
    """Headers plus an attribute tree of depth two.

    Header names are stored lower-cased. The tree always carries the headers
    under the ``headers`` branch, so ``headers.x-forwarded-for`` and a direct
    header lookup agree.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    tree: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def build(
        cls, headers: Mapping[str, str], **branches: Mapping[str, Any]
    ) -> RequestAttributes:
        """Create attributes from a header mapping and extra tree branches."""
        normalized = MappingProxyType({name.lower(): value for name, value in headers.items()})
        tree = {name: MappingProxyType(dict(branch)) for name, branch in branches.items()}
        tree["headers"] = normalized
        return cls(headers=normalized, tree=MappingProxyType(tree))

    def header(self, name: str) -> str | None:
        """Return a header value, or None when the request does not carry it."""
        return _as_text(self.headers.get(name.lower()))

    def resolve(self, branch: str, key: str) -> str | None:
        """Return ``tree[branch][key]`` as text, or None for any missing level."""
        if branch == "headers":
            return self.header(key)
        node = self.tree.get(branch)
        if not isinstance(node, Mapping):
            return None
        return _as_text(node.get(key))
