"""
Breed search: case-insensitive substring match on the breed name.

A linear scan over the catalog, re-run on every query change.
"""

from __future__ import annotations

from typing import Sequence

from meowa.domain.breed import Breed


def matches(breed: Breed, query: str) -> bool:
    """True if the breed name contains the query, ignoring case."""
    return query.lower() in breed.name.lower()


def filter_breeds(catalog: Sequence[Breed], query: str) -> list[Breed]:
    """
    Return the breeds whose name contains `query`, in catalog order.

    An empty query returns the whole catalog. The query is not trimmed or
    tokenized: "sh " only matches names containing "sh" followed by a space.

    Args:
        catalog: Full breed list.
        query: Free text typed by the user.

    Returns:
        New list; the catalog itself is never modified.
    """
    if not query:
        return list(catalog)
    return [b for b in catalog if matches(b, query)]
