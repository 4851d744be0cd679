"""Tests for the profile repository and API"""
import time

from apps.profile import repository
from apps.profile.models import AboutMe
from apps.profile.repository import PROFILE_DEFAULTS, get_profile, upsert_profile
from apps.shared.database import SessionLocal, utcnow

FULL_PROFILE = {
    "name": "Jane Smith",
    "title": "Full Stack Developer",
    "bio": "Experienced developer with passion for clean code",
    "email": "jane@example.com",
    "github_url": "https://github.com/janesmith",
    "linkedin_url": "https://linkedin.com/in/janesmith",
    "website_url": "https://janesmith.dev",
    "profile_image_url": "https://example.com/profile.jpg",
}


def test_get_profile_absent(db):
    assert get_profile(db) is None


def test_first_upsert_creates_profile(db):
    profile = upsert_profile(db, FULL_PROFILE)

    assert profile.id == 1
    for key, value in FULL_PROFILE.items():
        assert getattr(profile, key) == value
    assert profile.updated_at is not None
    assert get_profile(db).id == profile.id


def test_first_upsert_fills_defaults(db):
    profile = upsert_profile(db, {})

    assert profile.name == PROFILE_DEFAULTS["name"] == "John Doe"
    assert profile.title == "Software Developer"
    assert profile.bio == "Passionate developer building amazing things."
    assert profile.email is None
    assert profile.github_url is None
    assert profile.linkedin_url is None
    assert profile.website_url is None
    assert profile.profile_image_url is None


def test_first_upsert_partial_input(db):
    profile = upsert_profile(db, {"name": "Ada", "email": "ada@example.com"})

    assert profile.name == "Ada"
    assert profile.email == "ada@example.com"
    assert profile.title == PROFILE_DEFAULTS["title"]
    assert profile.bio == PROFILE_DEFAULTS["bio"]


def test_upsert_merges_present_fields_only(db):
    upsert_profile(db, FULL_PROFILE)

    profile = upsert_profile(
        db, {"name": "Jane Doe", "title": "Senior Developer", "email": "jane.doe@example.com"}
    )

    assert profile.name == "Jane Doe"
    assert profile.title == "Senior Developer"
    assert profile.email == "jane.doe@example.com"
    assert profile.bio == FULL_PROFILE["bio"]
    assert profile.github_url == FULL_PROFILE["github_url"]


def test_upsert_null_clears_field(db):
    upsert_profile(db, FULL_PROFILE)

    profile = upsert_profile(db, {"email": None, "github_url": None, "website_url": None})

    assert profile.email is None
    assert profile.github_url is None
    assert profile.website_url is None
    assert profile.linkedin_url == FULL_PROFILE["linkedin_url"]
    assert profile.name == FULL_PROFILE["name"]


def test_upsert_keeps_single_row(db):
    upsert_profile(db, FULL_PROFILE)
    upsert_profile(db, {"name": "Second"})
    upsert_profile(db, {"bio": "Third"})

    assert db.query(AboutMe).count() == 1


def test_empty_upsert_leaves_timestamp(db):
    initial = upsert_profile(db, FULL_PROFILE)
    initial_updated_at = initial.updated_at

    result = upsert_profile(db, {})

    assert result.id == initial.id
    assert result.name == FULL_PROFILE["name"]
    assert result.updated_at == initial_updated_at


def test_upsert_with_changes_refreshes_timestamp(db):
    initial_updated_at = upsert_profile(db, FULL_PROFILE).updated_at
    time.sleep(0.01)

    result = upsert_profile(db, {"name": "Updated Name"})

    assert result.updated_at > initial_updated_at


def test_upsert_ignores_unknown_keys(db):
    profile = upsert_profile(db, {"name": "Jane", "id": 42, "favourite_colour": "blue"})

    assert profile.id == 1
    assert not hasattr(profile, "favourite_colour")


def test_concurrent_create_merges_into_existing_row(db, monkeypatch):
    real_get_profile = repository.get_profile
    calls = []

    def get_profile_after_other_writer(session):
        # First lookup misses; another request inserts the row right after
        calls.append(session)
        if len(calls) == 1:
            other = SessionLocal()
            try:
                other.add(AboutMe(id=1, name="Winner", title="t", bio="b", updated_at=utcnow()))
                other.commit()
            finally:
                other.close()
            return None
        return real_get_profile(session)

    monkeypatch.setattr(repository, "get_profile", get_profile_after_other_writer)

    profile = upsert_profile(db, {"bio": "Merged"})

    assert profile.name == "Winner"
    assert profile.bio == "Merged"
    assert db.query(AboutMe).count() == 1


# ──────────────────────────────────────────────────────────────────────────────
# HTTP
# ──────────────────────────────────────────────────────────────────────────────

def test_get_profile_endpoint_returns_null(client):
    response = client.get("/profile")

    assert response.status_code == 200
    assert response.json() is None


def test_put_profile_endpoint(client):
    response = client.put("/profile", json=FULL_PROFILE)
    assert response.status_code == 200
    assert response.json()["name"] == "Jane Smith"

    response = client.put("/profile", json={"website_url": None})
    body = response.json()
    assert body["website_url"] is None
    assert body["email"] == "jane@example.com"

    assert client.get("/profile").json()["id"] == 1


def test_put_profile_validation(client):
    assert client.put("/profile", json={"email": "not-an-email"}).status_code == 422
    assert client.put("/profile", json={"github_url": "github.com/jane"}).status_code == 422
    assert client.put("/profile", json={"name": ""}).status_code == 422
    assert client.put("/profile", json={"name": None}).status_code == 422
    assert client.get("/profile").json() is None
