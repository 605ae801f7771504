"""Dependency tree flattening for license checks.

Turns the nested ``npm ls --json --long`` tree into a flat map keyed by
``name@version``. Each key is recorded once, at its first depth-first
encounter, and never expanded again. This keeps the walk finite on
diamonds and on cycles.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from license_allowlist.exceptions import StructuralTreeError
from license_allowlist.models.module import FlatModuleMap, ModuleRecord, make_module_key

# Node fields that are not copied into ModuleRecord.metadata
_RESERVED_FIELDS = frozenset({"dependencies", "licenses", "license"})


def flatten_tree(tree: Any) -> FlatModuleMap:
    """Flatten a dependency tree into a module key to record map.

    The root node itself is not included, only its descendants.

    Args:
        tree: Root node of the dependency tree.

    Returns:
        Read-only mapping of module key to ModuleRecord, in depth-first
        encounter order.

    Raises:
        StructuralTreeError: If a node is not a mapping, a ``dependencies``
            field is not a mapping, or a dependency has no usable identity.
    """
    if not isinstance(tree, Mapping):
        raise StructuralTreeError(
            f"Dependency tree root must be an object, got {type(tree).__name__}"
        )

    modules: dict[str, ModuleRecord] = {}
    # The root is never recorded, even when a cycle leads back to it
    visited: set[str] = set()
    root_key = _root_key(tree)
    if root_key is not None:
        visited.add(root_key)
    # Worklist of (dependency key, node), popped in depth-first pre-order
    stack = list(reversed(_dependency_items(tree, "root")))

    while stack:
        dep_key, node = stack.pop()
        key = _module_key(dep_key, node)
        if key in visited:
            continue
        visited.add(key)
        modules[key] = _build_record(node)
        stack.extend(reversed(_dependency_items(node, key)))

    return MappingProxyType(modules)


def _dependency_items(node: Mapping[str, Any], owner: str) -> list[tuple[Any, Any]]:
    """Return the (key, child) pairs of a node's dependencies.

    Args:
        node: Tree node whose dependencies to list.
        owner: Name used in error messages.

    Returns:
        List of dependency pairs, empty if the node has none.
    """
    dependencies = node.get("dependencies")
    if dependencies is None:
        return []
    if not isinstance(dependencies, Mapping):
        raise StructuralTreeError(
            f"Dependencies of '{owner}' must be an object, "
            f"got {type(dependencies).__name__}"
        )
    return list(dependencies.items())


def _root_key(tree: Mapping[str, Any]) -> Optional[str]:
    """Return the root's module key, or None if it has no name and version."""
    name = tree.get("name")
    version = tree.get("version")
    if isinstance(name, str) and name and isinstance(version, str) and version:
        return make_module_key(name, version)
    return None


def _module_key(dep_key: Any, node: Any) -> str:
    """Build the module key for a dependency node."""
    if not isinstance(node, Mapping):
        raise StructuralTreeError(
            f"Dependency '{dep_key}' must be an object, got {type(node).__name__}"
        )
    name = node.get("name") or dep_key
    version = node.get("version")
    if not isinstance(name, str) or not name:
        raise StructuralTreeError(f"Dependency '{dep_key}' has no usable name")
    if not isinstance(version, str) or not version:
        raise StructuralTreeError(f"Dependency '{name}' has no usable version")
    return make_module_key(name, version)


def _build_record(node: Mapping[str, Any]) -> ModuleRecord:
    """Build a ModuleRecord from a tree node, dropping nested dependencies."""
    raw = node.get("licenses")
    if raw is None:
        raw = node.get("license")
    metadata = {k: v for k, v in node.items() if k not in _RESERVED_FIELDS}
    return ModuleRecord(licenses=normalize_license(raw), metadata=metadata)


def normalize_license(value: Any) -> Optional[str]:
    """Normalize a declared license into a single string.

    Handles the legacy npm forms: ``{"type": "MIT"}`` and lists of either
    strings or such objects. A list of several licenses becomes a
    ``(A OR B)`` expression.

    Args:
        value: Raw ``license``/``licenses`` field from the tree node.

    Returns:
        License string, or None if no license is declared.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        return normalize_license(value.get("type"))
    if isinstance(value, (list, tuple)):
        ids = [lic for lic in (normalize_license(v) for v in value) if lic]
        if not ids:
            return None
        if len(ids) == 1:
            return ids[0]
        return "(" + " OR ".join(ids) + ")"
    return str(value)
