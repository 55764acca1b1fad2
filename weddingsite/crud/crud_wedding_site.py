from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from weddingsite.models.wedding_site import WeddingSite
from weddingsite.schemas.wedding_site import WeddingSiteCreate, WeddingSiteUpdate


def get_for_owner(db: Session, site_id: UUID, user_id: UUID) -> Optional[WeddingSite]:
    return db.query(WeddingSite).filter(
        WeddingSite.id == site_id,
        WeddingSite.user_id == user_id,
    ).first()


def get_by_subdomain(db: Session, subdomain: str) -> Optional[WeddingSite]:
    return db.query(WeddingSite).filter(WeddingSite.subdomain == subdomain).first()


def get_by_custom_domain(db: Session, domain: str) -> Optional[WeddingSite]:
    return db.query(WeddingSite).filter(WeddingSite.custom_domain == domain).first()


def get_multi_by_owner(db: Session, user_id: UUID) -> List[WeddingSite]:
    return db.query(WeddingSite).filter(
        WeddingSite.user_id == user_id
    ).order_by(WeddingSite.created_at.desc()).all()


def count_by_owner(db: Session, user_id: UUID) -> int:
    return db.query(WeddingSite).filter(WeddingSite.user_id == user_id).count()


def create(db: Session, *, obj_in: WeddingSiteCreate, user_id: UUID) -> WeddingSite:
    data = obj_in.model_dump(exclude_none=True)
    db_obj = WeddingSite(user_id=user_id, **data)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def update(db: Session, *, db_obj: WeddingSite, obj_in: WeddingSiteUpdate) -> WeddingSite:
    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # null clears optional copy, but required columns keep their value
        if value is None and not WeddingSite.__table__.c[field].nullable:
            continue
        setattr(db_obj, field, value)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def set_custom_domain(db: Session, *, db_obj: WeddingSite, domain: Optional[str]) -> WeddingSite:
    db_obj.custom_domain = domain
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def remove(db: Session, *, db_obj: WeddingSite) -> None:
    db.delete(db_obj)
    db.commit()
