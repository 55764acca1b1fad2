"""
Public API (no auth required)

- /public/domain-lookup  custom domain → subdomain, used for custom domain routing
- /public/sites/{sub}    the public site document guests see
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from weddingsite.api import deps
from weddingsite.crud import crud_wedding_site
from weddingsite.schemas.domain import DomainLookupResult
from weddingsite.schemas.wedding_site import WeddingSitePublic
from weddingsite.services import domain_directory

router = APIRouter()
logger = logging.getLogger("weddingsite.public")


@router.get("/domain-lookup", response_model=DomainLookupResult)
def lookup_domain(
    domain: Optional[str] = Query(None),
    db: Session = Depends(deps.get_db),
) -> Any:
    """
    Resolve a custom domain to its site's subdomain.
    Matches the domain as given, without "www." and with "www.".
    """
    if not domain:
        raise HTTPException(status_code=400, detail="Domain is required")

    try:
        subdomain = domain_directory.lookup(db, domain)
    except domain_directory.DirectoryLookupError:
        logger.exception("Error looking up domain %s", domain)
        raise HTTPException(status_code=500, detail="Internal server error")

    if subdomain is None:
        raise HTTPException(status_code=404, detail="Site not found")
    return DomainLookupResult(subdomain=subdomain)


@router.get("/sites/{subdomain}", response_model=WeddingSitePublic)
def read_public_site(
    subdomain: str,
    db: Session = Depends(deps.get_db),
) -> Any:
    site = crud_wedding_site.get_by_subdomain(db, subdomain)
    if not site:
        raise HTTPException(status_code=404, detail="Wedding site not found")
    return site
