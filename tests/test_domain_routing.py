"""Unit tests for host classification and path rewriting."""
import pytest

from weddingsite.config import settings
from weddingsite.services.domain_routing import (
    HostClass,
    classify_host,
    is_bypassed_path,
    normalize_host,
    rewrite_path,
    rewrite_raw_path,
)

PLATFORM = ["localhost", "wedding-tiv4.vercel.app", "vercel.app"]
SPOOFED = "evilwedding-tiv4.vercel.app.attacker.test"


@pytest.mark.parametrize("host", [
    "localhost",
    "localhost:3000",
    "wedding-tiv4.vercel.app",
    "WEDDING-TIV4.VERCEL.APP",
    "preview-123.vercel.app",
    "wedding-tiv4.vercel.app.",
])
def test_platform_hosts(host):
    assert classify_host(host, PLATFORM, "suffix") is HostClass.PLATFORM


@pytest.mark.parametrize("host", [
    "ourwedding.example.com",
    "www.ourwedding.example.com:443",
    "notvercel.app",
    SPOOFED,
])
def test_external_hosts_suffix_mode(host):
    assert classify_host(host, PLATFORM, "suffix") is HostClass.EXTERNAL


def test_substring_mode_misclassifies_spoofed_host():
    # Legacy containment check: any host containing a platform domain counts as ours
    assert classify_host(SPOOFED, PLATFORM, "substring") is HostClass.PLATFORM
    assert classify_host("mylocalhost.example.com", PLATFORM, "substring") is HostClass.PLATFORM


def test_substring_mode_still_routes_real_custom_domains():
    assert classify_host("ourwedding.example.com", PLATFORM, "substring") is HostClass.EXTERNAL


@pytest.mark.parametrize("mode", ["suffix", "substring"])
@pytest.mark.parametrize("host", ["", None, "   "])
def test_missing_host_is_external(host, mode):
    assert classify_host(host, PLATFORM, mode) is HostClass.EXTERNAL


def test_classify_uses_settings_by_default(monkeypatch):
    monkeypatch.setattr(settings, "PLATFORM_DOMAINS", "weddings.test")
    monkeypatch.setattr(settings, "PLATFORM_DOMAIN_MATCH", "suffix")
    assert classify_host("app.weddings.test") is HostClass.PLATFORM
    assert classify_host("localhost") is HostClass.EXTERNAL


def test_classify_returns_string_values():
    assert classify_host("localhost", PLATFORM) == "platform-domain"
    assert classify_host("example.com", PLATFORM) == "external-domain"


@pytest.mark.parametrize("raw,expected", [
    ("Example.COM:8080", "example.com"),
    ("[::1]:8000", "::1"),
    ("example.com.", "example.com"),
    (None, ""),
])
def test_normalize_host(raw, expected):
    assert normalize_host(raw) == expected


@pytest.mark.parametrize("path", [
    "/api/v1/public/domain-lookup",
    "/static/app.css",
    "/auth/signin",
    "/dashboard/sites/1",
    "/docs",
    "/openapi.json",
    "/health",
    "/favicon.ico",
    "/gallery/photo.jpg",
])
def test_bypassed_paths(path):
    assert is_bypassed_path(path) is True


@pytest.mark.parametrize("path", ["/", "/gallery", "/rsvp", "/our-story/details"])
def test_site_paths_not_bypassed(path):
    assert is_bypassed_path(path) is False


@pytest.mark.parametrize("path,expected", [
    ("/", "/site/annaandben"),
    ("", "/site/annaandben"),
    ("/gallery", "/site/annaandben/gallery"),
    ("/our-story/details", "/site/annaandben/our-story/details"),
    ("/gallery/", "/site/annaandben/gallery/"),
])
def test_rewrite_path(path, expected):
    assert rewrite_path(path, "annaandben") == expected


@pytest.mark.parametrize("raw_path,expected", [
    (b"/", b"/site/annaandben"),
    (b"", b"/site/annaandben"),
    (b"/our%20story", b"/site/annaandben/our%20story"),
    (b"/caf%C3%A9/menu", b"/site/annaandben/caf%C3%A9/menu"),
])
def test_rewrite_raw_path_keeps_encoding(raw_path, expected):
    assert rewrite_raw_path(raw_path, "annaandben") == expected
