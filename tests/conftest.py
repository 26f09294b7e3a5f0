"""Shared fixtures: TheCatAPI-shaped breed payloads."""

from __future__ import annotations

from typing import Any, Callable

import pytest


def breed_json(name: str, breed_id: str | None = None, /, **overrides: Any) -> dict[str, Any]:
    """One element of the /v1/breeds array, trimmed to realistic fields."""
    data: dict[str, Any] = {
        "weight": {"imperial": "7 - 10", "metric": "3 - 5"},
        "id": breed_id or name[:4].lower(),
        "name": name,
        "cfa_url": "http://cfa.org/Breeds/BreedsAB/Abyssinian.aspx",
        "temperament": "Active, Energetic, Independent, Intelligent, Gentle",
        "origin": "Egypt",
        "country_codes": "EG",
        "country_code": "EG",
        "description": f"The {name} is a cat.",
        "life_span": "14 - 15",
        "indoor": 0,
        "lap": 1,
        "adaptability": 5,
        "affection_level": 5,
        "child_friendly": 3,
        "dog_friendly": 4,
        "energy_level": 5,
        "grooming": 1,
        "health_issues": 2,
        "intelligence": 5,
        "shedding_level": 2,
        "social_needs": 5,
        "stranger_friendly": 5,
        "vocalisation": 1,
        "experimental": 0,
        "hairless": 0,
        "natural": 1,
        "rare": 0,
        "rex": 0,
        "suppressed_tail": 0,
        "short_legs": 0,
        "wikipedia_url": f"https://en.wikipedia.org/wiki/{name.replace(' ', '_')}",
        "hypoallergenic": 0,
        "reference_image_id": "0XYvRd7oD",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_breed_json() -> Callable[..., dict[str, Any]]:
    return breed_json


@pytest.fixture
def three_breeds_json() -> list[dict[str, Any]]:
    return [
        breed_json("Abyssinian", "abys"),
        breed_json("Bengal", "beng"),
        breed_json("British Shorthair", "bsho", reference_image_id=None),
    ]
