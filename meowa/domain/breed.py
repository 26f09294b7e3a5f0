"""
Breed records as returned by TheCatAPI `/v1/breeds`.

Records are frozen: they are built once when a response is decoded and never
mutated afterwards. Decoding is strict on the fields the app relies on and on
the types of the optional fields that are present; unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from meowa.utils.config import cat_image_base_url

REQUIRED_STR_FIELDS = ("id", "name", "description", "temperament", "origin", "life_span")

OPTIONAL_STR_FIELDS = (
    "cfa_url",
    "vetstreet_url",
    "vcahospitals_url",
    "wikipedia_url",
    "country_codes",
    "country_code",
    "alt_names",
)

TRAIT_FIELDS = (
    "indoor",
    "lap",
    "adaptability",
    "affection_level",
    "child_friendly",
    "dog_friendly",
    "energy_level",
    "grooming",
    "health_issues",
    "intelligence",
    "shedding_level",
    "social_needs",
    "stranger_friendly",
    "vocalisation",
    "experimental",
    "hairless",
    "natural",
    "rare",
    "rex",
    "suppressed_tail",
    "short_legs",
    "hypoallergenic",
)


class BreedSchemaError(ValueError):
    """Raised when a breed object does not match the expected schema."""


def _require_str(raw: Mapping[str, Any], key: str, where: str) -> str:
    if key not in raw:
        raise BreedSchemaError(f"{where}: missing required field '{key}'")
    val = raw[key]
    if not isinstance(val, str):
        raise BreedSchemaError(f"{where}: field '{key}' must be a string, got {type(val).__name__}")
    return val


def _optional_str(raw: Mapping[str, Any], key: str, where: str) -> str | None:
    val = raw.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise BreedSchemaError(f"{where}: field '{key}' must be a string or null")
    return val


def _optional_int(raw: Mapping[str, Any], key: str, where: str) -> int | None:
    val = raw.get(key)
    if val is None:
        return None
    # bool is an int subclass; JSON true/false is not a trait score
    if isinstance(val, bool) or not isinstance(val, int):
        raise BreedSchemaError(f"{where}: field '{key}' must be an integer or null")
    return val


@dataclass(frozen=True)
class Weight:
    imperial: str
    metric: str

    @classmethod
    def from_api(cls, raw: Any, where: str = "weight") -> Weight:
        if not isinstance(raw, dict):
            raise BreedSchemaError(f"{where}: must be an object")
        return cls(
            imperial=_require_str(raw, "imperial", where),
            metric=_require_str(raw, "metric", where),
        )


@dataclass(frozen=True)
class Breed:
    """A single cat breed. Passive value object; identity is `id`."""

    id: str
    name: str
    weight: Weight
    description: str
    temperament: str
    origin: str
    life_span: str
    reference_image_id: str | None = None
    cfa_url: str | None = None
    vetstreet_url: str | None = None
    vcahospitals_url: str | None = None
    wikipedia_url: str | None = None
    country_codes: str | None = None
    country_code: str | None = None
    alt_names: str | None = None
    image_url: str | None = None
    traits: tuple[tuple[str, int], ...] = ()

    @classmethod
    def from_api(cls, raw: Any, index: int | None = None, image_base_url: str | None = None) -> Breed:
        """
        Build a Breed from one element of the API's JSON array.

        Args:
            raw: Decoded JSON object.
            index: Position in the array, used only in error messages.
            image_base_url: CDN base for `image_url`. None reads CAT_IMAGE_BASE_URL.

        Raises:
            BreedSchemaError: If a required field is missing or a field has the wrong type.
        """
        where = f"breed[{index}]" if index is not None else "breed"
        if not isinstance(raw, dict):
            raise BreedSchemaError(f"{where}: must be an object, got {type(raw).__name__}")
        if "weight" not in raw:
            raise BreedSchemaError(f"{where}: missing required field 'weight'")

        values = {k: _require_str(raw, k, where) for k in REQUIRED_STR_FIELDS}
        optional = {k: _optional_str(raw, k, where) for k in OPTIONAL_STR_FIELDS}
        traits = []
        for k in TRAIT_FIELDS:
            v = _optional_int(raw, k, where)
            if v is not None:
                traits.append((k, v))
        reference_image_id = _optional_str(raw, "reference_image_id", where)

        return cls(
            weight=Weight.from_api(raw["weight"], f"{where}.weight"),
            reference_image_id=reference_image_id,
            image_url=image_url_for(reference_image_id, image_base_url),
            traits=tuple(sorted(traits)),
            **values,
            **optional,
        )

    def trait(self, key: str) -> int | None:
        """Score of one trait (e.g. "affection_level"), or None if the API left it out."""
        for k, v in self.traits:
            if k == key:
                return v
        return None


def image_url_for(reference_image_id: str | None, base_url: str | None = None) -> str | None:
    """CDN image URL, or None when there is no reference image."""
    if not reference_image_id:
        return None
    base = (base_url or cat_image_base_url()).rstrip("/")
    return f"{base}/{reference_image_id}.jpg"
