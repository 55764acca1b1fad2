"""Tests for custom domain → subdomain lookup."""
import pytest
from sqlalchemy.exc import OperationalError

from weddingsite.services import domain_directory
from weddingsite.services.domain_directory import DirectoryLookupError, candidate_forms, lookup
from tests.conftest import create_site, create_user


def test_candidate_forms_for_www_host():
    # input and www-prefixed form coincide, so only two distinct candidates
    assert candidate_forms("www.example.com") == ["www.example.com", "example.com"]


def test_candidate_forms_for_bare_host():
    assert candidate_forms("example.com") == ["example.com", "www.example.com"]


@pytest.mark.parametrize("stored", ["ourwedding.example.com", "www.ourwedding.example.com"])
@pytest.mark.parametrize("requested", [
    "ourwedding.example.com",
    "www.ourwedding.example.com",
])
def test_www_and_bare_forms_resolve_to_same_site(db, stored, requested):
    user = create_user(db)
    create_site(db, user, "annaandben", custom_domain=stored)

    assert lookup(db, requested) == "annaandben"


def test_lookup_is_case_insensitive(db):
    user = create_user(db)
    create_site(db, user, "annaandben", custom_domain="ourwedding.example.com")

    assert lookup(db, "OurWedding.Example.com") == "annaandben"


def test_lookup_picks_the_owning_site(db):
    create_site(db, create_user(db), "annaandben", custom_domain="anna.example.com")
    create_site(db, create_user(db), "carlaanddan", custom_domain="carla.example.com")

    assert lookup(db, "www.carla.example.com") == "carlaanddan"


def test_unknown_domain_is_not_found(db):
    create_site(db, create_user(db), "annaandben")

    assert lookup(db, "ourwedding.example.com") is None


@pytest.mark.parametrize("domain", ["", None])
def test_empty_domain_is_not_found(db, domain):
    assert lookup(db, domain) is None


def test_store_failure_is_not_not_found():
    class _BrokenSession:
        def query(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is down"))

    with pytest.raises(DirectoryLookupError):
        domain_directory.lookup(_BrokenSession(), "ourwedding.example.com")
