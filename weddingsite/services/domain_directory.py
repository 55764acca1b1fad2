"""
Domain directory: custom domain → owning site's subdomain.

Couples may register either the apex or the www form of their domain and
guests may arrive on either, so a lookup matches the requested host, its
www-stripped form and the www-prefixed stripped form.
"""

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from weddingsite.models.wedding_site import WeddingSite

logger = logging.getLogger("weddingsite.domain.directory")

WWW_PREFIX = "www."


class DirectoryLookupError(RuntimeError):
    """The backing store failed; not the same as "no such domain"."""


def strip_www(domain: str) -> str:
    if domain.startswith(WWW_PREFIX):
        return domain[len(WWW_PREFIX):]
    return domain


def candidate_forms(domain: str) -> List[str]:
    clean = strip_www(domain)
    forms: List[str] = []
    for form in (domain, clean, f"{WWW_PREFIX}{clean}"):
        if form not in forms:
            forms.append(form)
    return forms


def lookup(db: Session, domain: Optional[str]) -> Optional[str]:
    """Return the subdomain of the site owning `domain`, or None."""
    domain = (domain or "").strip().lower()
    if not domain:
        return None

    forms = candidate_forms(domain)
    try:
        site = (
            db.query(WeddingSite.subdomain)
            .filter(or_(*(WeddingSite.custom_domain == f for f in forms)))
            .first()
        )
    except SQLAlchemyError as exc:
        raise DirectoryLookupError(f"Domain lookup failed for {domain}") from exc

    if site is None:
        logger.debug("No site registered for domain %s", domain)
        return None
    return site.subdomain
