"""
Alias reference helpers for DTCG token documents.

An alias is a string token value of the form "{group.path.to.token}". It is
resolved by dotted path lookup against the token document. Keys may contain
dots themselves (spacing uses "semantic.md"), so lookup tries the longest
matching key first.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

_ALIAS_RE = re.compile(r"^\{([^{}]+)\}$")


class UnresolvedAliasError(KeyError):
    """Raised when an alias path does not name a token in the document."""


def is_alias(value: Any) -> bool:
    """Check whether a token value is an alias reference."""
    return isinstance(value, str) and _ALIAS_RE.match(value) is not None


def parse_alias(alias: str) -> list[str]:
    """Split '{color.primitive.neutral.50}' into its path segments."""
    match = _ALIAS_RE.match(alias) if isinstance(alias, str) else None
    if match is None:
        raise ValueError(f"Not an alias reference: {alias!r}")
    return match.group(1).split(".")


def _lookup(node: Any, parts: list[str]) -> Any:
    if not parts:
        return node
    if not isinstance(node, Mapping):
        return None
    # Longest dotted key first: "semantic.md" before "semantic"
    for end in range(len(parts), 0, -1):
        key = ".".join(parts[:end])
        if key in node:
            found = _lookup(node[key], parts[end:])
            if found is not None:
                return found
    return None


def resolve_alias(tokens: Mapping[str, Any], alias: str, *, max_depth: int = 16) -> Any:
    """Resolve an alias to the literal value of the token it names.

    Chained aliases are followed up to max_depth hops.

    Raises:
        UnresolvedAliasError: If the path does not name a token with a $value.
    """
    current: Any = alias
    for _ in range(max_depth):
        if not is_alias(current):
            return current
        token = _lookup(tokens, parse_alias(current))
        if not isinstance(token, Mapping) or "$value" not in token:
            raise UnresolvedAliasError(current)
        current = token["$value"]
    raise UnresolvedAliasError(f"{alias} (alias chain deeper than {max_depth})")


def iter_aliases(tokens: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    """Yield (token path, alias) for every alias-valued token in the document."""
    for key, node in tokens.items():
        if key.startswith("$") or not isinstance(node, Mapping):
            continue
        path = f"{prefix}.{key}" if prefix else key
        if "$value" in node:
            if is_alias(node["$value"]):
                yield path, node["$value"]
        else:
            yield from iter_aliases(node, path)


def find_unresolved_aliases(tokens: Mapping[str, Any]) -> list[str]:
    """Return the token paths whose alias does not resolve."""
    unresolved: list[str] = []
    for path, alias in iter_aliases(tokens):
        try:
            resolve_alias(tokens, alias)
        except UnresolvedAliasError:
            unresolved.append(path)
    return unresolved
