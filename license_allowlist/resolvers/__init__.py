"""Dependency tree resolvers package."""

from license_allowlist.resolvers.npm import NpmTreeResolver, load_tree_file, parse_tree

__all__ = [
    "NpmTreeResolver",
    "load_tree_file",
    "parse_tree",
]
