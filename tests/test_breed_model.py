"""
Tests for Breed decoding and the derived image URL.
"""

from __future__ import annotations

import pickle
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from meowa.domain.breed import Breed, BreedSchemaError, Weight, image_url_for
from meowa.infrastructure.cat_api_client import _parse_breeds_response


@pytest.fixture(autouse=True)
def default_image_base(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAT_IMAGE_BASE_URL", raising=False)


def test_from_api_maps_fields(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Abyssinian", "abys"))
    assert b.id == "abys"
    assert b.name == "Abyssinian"
    assert b.weight == Weight(imperial="7 - 10", metric="3 - 5")
    assert b.origin == "Egypt"
    assert b.life_span == "14 - 15"
    assert b.reference_image_id == "0XYvRd7oD"
    assert b.wikipedia_url == "https://en.wikipedia.org/wiki/Abyssinian"
    assert b.trait("affection_level") == 5
    assert b.trait("hypoallergenic") == 0
    assert b.trait("bred_for") is None


def test_image_url(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Abyssinian"))
    assert b.image_url == "https://cdn2.thecatapi.com/images/0XYvRd7oD.jpg"


def test_image_url_none_without_reference(make_breed_json) -> None:
    raw = make_breed_json("Burmilla")
    del raw["reference_image_id"]
    b = Breed.from_api(raw)
    assert b.reference_image_id is None
    assert b.image_url is None
    assert image_url_for("") is None


def test_image_url_respects_configured_cdn(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAT_IMAGE_BASE_URL", "https://img.example.com/cats/")
    assert image_url_for("abc") == "https://img.example.com/cats/abc.jpg"


def test_unknown_keys_ignored(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal", bred_for="mousing", image={"url": "x"}))
    assert b.name == "Bengal"


def test_optional_fields_may_be_absent() -> None:
    b = Breed.from_api({
        "id": "x", "name": "X", "weight": {"imperial": "1", "metric": "1"},
        "description": "d", "temperament": "t", "origin": "o", "life_span": "1",
    })
    assert b.traits == ()
    assert b.cfa_url is None


@pytest.mark.parametrize("field", ["id", "name", "description", "temperament", "origin", "life_span", "weight"])
def test_missing_required_field(make_breed_json, field: str) -> None:
    raw = make_breed_json("Bengal")
    del raw[field]
    with pytest.raises(BreedSchemaError, match=field):
        Breed.from_api(raw, index=3)


def test_error_mentions_index(make_breed_json) -> None:
    raw = make_breed_json("Bengal")
    del raw["name"]
    with pytest.raises(BreedSchemaError, match=r"breed\[7\]"):
        Breed.from_api(raw, index=7)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": 42},
        {"weight": "3 - 5"},
        {"weight": {"metric": "3 - 5"}},
        {"reference_image_id": 12},
        {"adaptability": "high"},
        {"lap": True},
        {"wikipedia_url": ["x"]},
    ],
)
def test_type_mismatch(make_breed_json, overrides) -> None:
    with pytest.raises(BreedSchemaError):
        Breed.from_api(make_breed_json("Bengal", **overrides))


def test_non_object_element() -> None:
    with pytest.raises(BreedSchemaError):
        Breed.from_api("Bengal")


def test_null_optional_fields(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal", reference_image_id=None, indoor=None, alt_names=None))
    assert b.reference_image_id is None
    assert b.trait("indoor") is None


def test_breed_is_immutable_and_picklable(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal"))
    with pytest.raises(FrozenInstanceError):
        b.name = "Other"  # type: ignore[misc]
    assert pickle.loads(pickle.dumps(b)) == b
    assert hash(b) == hash(Breed.from_api(make_breed_json("Bengal")))


def test_traits_cannot_be_changed_after_decoding(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal"))
    before = hash(b)
    with pytest.raises(TypeError):
        b.traits["lap"] = 99  # type: ignore[index]
    with pytest.raises(AttributeError):
        b.traits.append(("lap", 99))  # type: ignore[attr-defined]
    assert b.trait("lap") == 1
    assert hash(b) == before
    assert b == Breed.from_api(make_breed_json("Bengal"))


def test_breeds_with_different_traits_are_not_equal(make_breed_json) -> None:
    a = Breed.from_api(make_breed_json("Bengal", lap=1))
    b = Breed.from_api(make_breed_json("Bengal", lap=0))
    assert a != b
    assert len({a, b}) == 2


def test_traits_sorted_by_name(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal"))
    keys = [k for k, _ in b.traits]
    assert keys == sorted(keys)


def test_image_url_computed_from_given_base(make_breed_json) -> None:
    b = Breed.from_api(make_breed_json("Bengal"), image_base_url="https://img.example.com/cats/")
    assert b.image_url == "https://img.example.com/cats/0XYvRd7oD.jpg"


def test_decoding_reads_image_base_once_per_response(make_breed_json) -> None:
    payload = [make_breed_json("Abyssinian"), make_breed_json("Bengal"), make_breed_json("Birman")]
    with patch("meowa.infrastructure.cat_api_client.cat_image_base_url", return_value="https://cdn.test") as mock_base, \
            patch("meowa.domain.breed.cat_image_base_url") as domain_base:
        breeds = _parse_breeds_response(payload)

    assert mock_base.call_count == 1
    domain_base.assert_not_called()
    assert [b.image_url for b in breeds] == ["https://cdn.test/0XYvRd7oD.jpg"] * 3
