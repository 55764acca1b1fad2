"""
Site pages: /site/{subdomain}[/{page}]

Target of custom-domain rewrites. Page rendering lives in the frontend; this
route hands it the public site document and the page that was asked for.
"""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from weddingsite.api import deps
from weddingsite.crud import crud_wedding_site
from weddingsite.schemas.wedding_site import SitePage, WeddingSitePublic

router = APIRouter()

HOME_PAGE = "home"


def _render(db: Session, subdomain: str, page: str) -> SitePage:
    site = crud_wedding_site.get_by_subdomain(db, subdomain)
    if not site:
        raise HTTPException(status_code=404, detail="Wedding site not found")
    return SitePage(page=page, site=WeddingSitePublic.model_validate(site))


@router.get("/{subdomain}", response_model=SitePage)
def site_home(subdomain: str, db: Session = Depends(deps.get_db)) -> Any:
    return _render(db, subdomain, HOME_PAGE)


@router.get("/{subdomain}/{page:path}", response_model=SitePage)
def site_page(subdomain: str, page: str, db: Session = Depends(deps.get_db)) -> Any:
    return _render(db, subdomain, page.strip("/") or HOME_PAGE)
