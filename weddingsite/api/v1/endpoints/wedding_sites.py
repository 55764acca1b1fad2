"""
Wedding Site Management API

Lets the signed-in couple:
  1. Create their site (one per account, paid accounts only)
  2. Check subdomain availability
  3. Read / update / delete their site
  4. Attach, replace or detach a custom domain
  5. Check whether the custom domain's DNS points at the edge
"""
import logging
from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from weddingsite.api import deps
from weddingsite.crud import crud_wedding_site
from weddingsite.models.user import User
from weddingsite.models.wedding_site import WeddingSite as WeddingSiteModel
from weddingsite.schemas.domain import DomainVerifyResult
from weddingsite.schemas.wedding_site import (
    CustomDomainUpdate,
    SubdomainAvailability,
    WeddingSite,
    WeddingSiteCreate,
    WeddingSiteUpdate,
)
from weddingsite.services.domain_routing import is_platform_host
from weddingsite.services.domain_verification import (
    DomainVerificationError,
    DomainVerifier,
    get_domain_verifier,
)
from weddingsite.services.validators import (
    is_valid_domain,
    is_valid_subdomain,
    normalize_custom_domain,
)

router = APIRouter()
logger = logging.getLogger("weddingsite.sites")


def _get_owned_site(db: Session, site_id: str, user: User) -> WeddingSiteModel:
    # a malformed id can't belong to the caller either
    try:
        site_uuid = UUID(site_id)
    except ValueError:
        site_uuid = None
    site = crud_wedding_site.get_for_owner(db, site_uuid, user.id) if site_uuid else None
    if not site:
        raise HTTPException(status_code=404, detail="Wedding site not found")
    return site


@router.get("/", response_model=List[WeddingSite])
def read_wedding_sites(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    return crud_wedding_site.get_multi_by_owner(db, current_user.id)


@router.post("/", response_model=WeddingSite, status_code=201)
def create_wedding_site(
    *,
    db: Session = Depends(deps.get_db),
    site_in: WeddingSiteCreate,
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    if not current_user.has_paid:
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail="Payment required to create a wedding site",
        )
    if crud_wedding_site.count_by_owner(db, current_user.id) > 0:
        raise HTTPException(
            status_code=400,
            detail="You already have a wedding site. Each account is limited to one site.",
        )
    if not is_valid_subdomain(site_in.subdomain):
        raise HTTPException(status_code=400, detail="Invalid subdomain format")
    if crud_wedding_site.get_by_subdomain(db, site_in.subdomain):
        raise HTTPException(status_code=400, detail="This subdomain is already taken")

    try:
        site = crud_wedding_site.create(db, obj_in=site_in, user_id=current_user.id)
    except IntegrityError:
        # lost a race for the subdomain after the check above
        db.rollback()
        raise HTTPException(status_code=400, detail="This subdomain is already taken")
    logger.info("Wedding site created: %s by user %s", site.subdomain, current_user.id)
    return site


@router.get("/check-subdomain", response_model=SubdomainAvailability)
def check_subdomain(
    subdomain: Optional[str] = Query(None),
    db: Session = Depends(deps.get_db),
) -> Any:
    if not subdomain:
        raise HTTPException(status_code=400, detail="Subdomain is required")
    existing = crud_wedding_site.get_by_subdomain(db, subdomain)
    return SubdomainAvailability(available=existing is None, subdomain=subdomain)


@router.get("/{site_id}", response_model=WeddingSite)
def read_wedding_site(
    site_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    return _get_owned_site(db, site_id, current_user)


@router.put("/{site_id}", response_model=WeddingSite)
def update_wedding_site(
    *,
    site_id: str,
    site_in: WeddingSiteUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    site = _get_owned_site(db, site_id, current_user)
    return crud_wedding_site.update(db, db_obj=site, obj_in=site_in)


@router.delete("/{site_id}")
def delete_wedding_site(
    site_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    site = _get_owned_site(db, site_id, current_user)
    subdomain = site.subdomain
    crud_wedding_site.remove(db, db_obj=site)
    logger.info("Wedding site deleted: %s", subdomain)
    return {"message": "Wedding site deleted successfully"}


@router.put("/{site_id}/custom-domain", response_model=WeddingSite)
def update_custom_domain(
    *,
    site_id: str,
    body: CustomDomainUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
) -> Any:
    """
    Attach or detach a custom domain.

    An empty value detaches. Otherwise the domain is stored lowercased without
    scheme, and must not be one of ours or belong to another site.
    """
    site = _get_owned_site(db, site_id, current_user)
    domain = normalize_custom_domain(body.custom_domain)

    if domain is None:
        previous = site.custom_domain
        site = crud_wedding_site.set_custom_domain(db, db_obj=site, domain=None)
        logger.info("Custom domain %s detached from %s", previous, site.subdomain)
        return site

    if not is_valid_domain(domain):
        raise HTTPException(
            status_code=400,
            detail="Please enter a valid domain (e.g., wedding.example.com)",
        )
    if is_platform_host(domain):
        raise HTTPException(status_code=400, detail="This domain belongs to the platform")

    owner = crud_wedding_site.get_by_custom_domain(db, domain)
    if owner and owner.id != site.id:
        raise HTTPException(status_code=409, detail="This domain is already in use")

    try:
        site = crud_wedding_site.set_custom_domain(db, db_obj=site, domain=domain)
    except IntegrityError:
        db.rollback()
        logger.info("Custom domain %s claimed concurrently by another site", domain)
        raise HTTPException(status_code=409, detail="This domain is already in use")
    logger.info("Custom domain %s attached to %s", domain, site.subdomain)
    return site


@router.get("/{site_id}/verify-domain", response_model=DomainVerifyResult)
def verify_domain(
    site_id: str,
    domain: Optional[str] = Query(None),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
    verifier: DomainVerifier = Depends(get_domain_verifier),
) -> Any:
    """
    Check the domain's DNS against the edge.

    Apex domains need an A record at the edge IP, everything else a CNAME to
    the edge hostname. Missing records are a normal state while DNS
    propagates and come back as verified=false, not as an error.
    """
    domain = normalize_custom_domain(domain)
    if not domain:
        raise HTTPException(status_code=400, detail="Domain is required")

    _get_owned_site(db, site_id, current_user)

    try:
        result = verifier.verify(domain)
    except DomainVerificationError:
        logger.exception("Error verifying domain %s", domain)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to verify domain", "verified": False},
        )

    return DomainVerifyResult(
        verified=result.verified,
        message=result.message,
        dns_info=result.dns_info,
    )
