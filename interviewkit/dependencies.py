"""Dependency graphs: build orders and catalogue cycle checks."""

from __future__ import annotations

from typing import Mapping, Sequence

DependencyGraph = Mapping[str, Sequence[str]]


def build_order(graph: DependencyGraph, package: str) -> list[str]:
    """Return ``package`` and everything it needs, each dependency before its dependents.

    Every package reached must be a key of ``graph``; an unknown one raises KeyError.
    """
    visited: set[str] = set()
    order: list[str] = []

    def visit(name: str) -> None:
        if name in visited:
            return
        visited.add(name)
        for dependency in graph[name]:
            visit(dependency)
        order.append(name)

    visit(package)
    return order


def is_catalog_valid(catalog: DependencyGraph) -> bool:
    """Return True when the catalogue has no dependency cycle.

    A dependency that is not itself a key of the catalogue counts as having
    no dependencies.
    """
    visited: set[str] = set()
    in_progress: set[str] = set()

    def has_cycle(key: str) -> bool:
        visited.add(key)
        in_progress.add(key)
        for dependency in catalog.get(key, ()):
            if dependency not in visited:
                if has_cycle(dependency):
                    return True
            elif dependency in in_progress:
                return True
        in_progress.discard(key)
        return False

    return not any(key not in visited and has_cycle(key) for key in catalog)


def is_catalog_valid_strict(catalog: DependencyGraph) -> bool:
    """Return True when the catalogue has no dependency cycle.

    Every dependency must be a key of the catalogue; an unknown one reached
    before any cycle is found raises KeyError.
    """
    visited: set[str] = set()
    in_progress: set[str] = set()

    def has_cycle(course: str) -> bool:
        if course in in_progress:
            return True
        if course in visited:
            return False
        visited.add(course)
        in_progress.add(course)
        if any(has_cycle(dependency) for dependency in catalog[course]):
            return True
        in_progress.discard(course)
        return False

    return not any(has_cycle(course) for course in catalog)