"""Tests for slug derivation and comma-list splitting"""
import re

import pytest

from apps.shared.utils import MAX_ID, is_valid_id, slugify, split_comma_list

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def test_slugify_example_title():
    assert (
        slugify("How to Build APIs with Node.js & TypeScript!")
        == "how-to-build-apis-with-node-js-typescript"
    )


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Hello World", "hello-world"),
        ("  --Leading and trailing--  ", "leading-and-trailing"),
        ("Multiple   spaces___and///symbols", "multiple-spaces-and-symbols"),
        ("Already-a-slug", "already-a-slug"),
        ("Version 2.0 Released", "version-2-0-released"),
        ("Crème brûlée", "cr-me-br-l-e"),
        ("!!!", ""),
    ],
)
def test_slugify_cases(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize(
    "title",
    [
        "React Best Practices",
        "C++ & Rust: a -- comparison?",
        "__init__ explained",
        "2024 in review!!",
        "ÜBER cool Ünïcödé",
    ],
)
def test_slugify_shape(title):
    """Only lowercase alphanumerics and single hyphens, no hyphen at either end."""
    slug = slugify(title)
    assert SLUG_PATTERN.match(slug), slug
    assert "--" not in slug


def test_slugify_is_deterministic():
    title = "Same Title, Same Slug"
    assert slugify(title) == slugify(title)


def test_split_comma_list():
    assert split_comma_list("React, Python ,PostgreSQL") == ["React", "Python", "PostgreSQL"]
    assert split_comma_list("a,, ,b,") == ["a", "b"]
    assert split_comma_list("") == []
    assert split_comma_list(None) == []


@pytest.mark.parametrize("value", [1, 42, MAX_ID])
def test_valid_ids(value):
    assert is_valid_id(value)


@pytest.mark.parametrize("value", [0, -1, MAX_ID + 1, 2**63, True, "1", 1.0, None])
def test_invalid_ids(value):
    assert not is_valid_id(value)
