"""Pytest configuration and fixtures."""
import os

# Must be set before weddingsite.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

import uuid
from datetime import datetime
from types import SimpleNamespace

import dns.resolver
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from weddingsite.core.security import create_access_token
from weddingsite.models import Base, User, WeddingSite


# --- Fake DNS ---

class FakeResolver:
    """
    Stand-in for dns.resolver.Resolver.
    Register answers with add_a / add_cname, or an exception with fail.
    Anything unregistered raises NXDOMAIN.
    """

    def __init__(self):
        self._answers = {}
        self.queries = []

    def add_a(self, name: str, *ips: str) -> None:
        self._answers[(name, "A")] = [SimpleNamespace(address=ip) for ip in ips]

    def add_cname(self, name: str, *targets: str) -> None:
        self._answers[(name, "CNAME")] = [SimpleNamespace(target=t) for t in targets]

    def fail(self, name: str, rdtype: str, exc: Exception) -> None:
        self._answers[(name, rdtype)] = exc

    def resolve(self, qname, rdtype="A", **kwargs):
        self.queries.append((qname, rdtype))
        answer = self._answers.get((qname, rdtype))
        if answer is None:
            raise dns.resolver.NXDOMAIN()
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_resolver():
    return FakeResolver()


# --- Database ---

@pytest.fixture(scope="session")
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    Base.metadata.create_all(bind=test_engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# --- App ---

@pytest.fixture
async def client(session_factory, fake_resolver):
    """
    Async HTTP client against the app with:
      - get_db bound to the in-memory test database
      - the domain verifier using fake_resolver instead of real DNS
    """
    from weddingsite.main import app as fastapi_app
    from weddingsite.api.deps import get_db
    from weddingsite.services.domain_verification import DomainVerifier, get_domain_verifier

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    fastapi_app.dependency_overrides[get_domain_verifier] = lambda: DomainVerifier(resolver=fake_resolver)

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac

    fastapi_app.dependency_overrides.clear()


# --- Helpers ---

def create_user(db, email: str = None, has_paid: bool = True) -> User:
    user = User(
        id=uuid.uuid4(),
        email=email or f"{uuid.uuid4().hex[:8]}@example.com",
        full_name="Test Couple",
        has_paid=has_paid,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def create_site(db, user: User, subdomain: str, custom_domain: str = None) -> WeddingSite:
    site = WeddingSite(
        user_id=user.id,
        subdomain=subdomain,
        custom_domain=custom_domain,
        partner1_name="Anna",
        partner2_name="Ben",
        wedding_date=datetime(2027, 6, 19, 15, 0),
        venue_name="Old Mill",
        venue_address="1 Mill Lane",
        venue_city="Hudson",
        venue_state="NY",
        venue_zip="12534",
    )
    db.add(site)
    db.commit()
    db.refresh(site)
    return site


SITE_PAYLOAD = {
    "subdomain": "annaandben",
    "partner1_name": "Anna",
    "partner2_name": "Ben",
    "partner1_email": "anna@example.com",
    "wedding_date": "2027-06-19T15:00:00",
    "venue_name": "Old Mill",
    "venue_address": "1 Mill Lane",
    "venue_city": "Hudson",
    "venue_state": "NY",
    "venue_zip": "12534",
}
