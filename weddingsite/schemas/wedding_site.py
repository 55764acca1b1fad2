from typing import Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel


# Shared properties
class WeddingSiteBase(BaseModel):
    partner1_name: Optional[str] = None
    partner2_name: Optional[str] = None
    partner1_email: Optional[str] = None
    partner2_email: Optional[str] = None
    wedding_date: Optional[datetime] = None
    wedding_time: Optional[str] = None
    venue_name: Optional[str] = None
    venue_address: Optional[str] = None
    venue_city: Optional[str] = None
    venue_state: Optional[str] = None
    venue_zip: Optional[str] = None
    venue_country: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    welcome_message: Optional[str] = None
    about_us_story: Optional[str] = None


# Properties to receive via API on creation
class WeddingSiteCreate(WeddingSiteBase):
    subdomain: str
    partner1_name: str
    partner2_name: str
    wedding_date: datetime
    venue_name: str
    venue_address: str
    venue_city: str
    venue_state: str
    venue_zip: str


# Properties to receive via API on update (custom_domain has its own endpoint)
class WeddingSiteUpdate(WeddingSiteBase):
    rsvp_enabled: Optional[bool] = None
    gifts_enabled: Optional[bool] = None
    accommodation_enabled: Optional[bool] = None
    transport_enabled: Optional[bool] = None
    guest_list_enabled: Optional[bool] = None


class WeddingSiteInDBBase(WeddingSiteBase):
    id: UUID
    subdomain: str
    custom_domain: Optional[str] = None
    rsvp_enabled: Optional[bool] = None
    gifts_enabled: Optional[bool] = None
    accommodation_enabled: Optional[bool] = None
    transport_enabled: Optional[bool] = None
    guest_list_enabled: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Additional properties to return via API
class WeddingSite(WeddingSiteInDBBase):
    user_id: UUID


# What guests see: no owner id, no partner emails
class WeddingSitePublic(BaseModel):
    id: UUID
    subdomain: str
    partner1_name: str
    partner2_name: str
    wedding_date: datetime
    wedding_time: Optional[str] = None
    venue_name: str
    venue_address: str
    venue_city: str
    venue_state: str
    venue_zip: str
    venue_country: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    welcome_message: Optional[str] = None
    about_us_story: Optional[str] = None
    rsvp_enabled: Optional[bool] = None
    gifts_enabled: Optional[bool] = None
    accommodation_enabled: Optional[bool] = None
    transport_enabled: Optional[bool] = None
    guest_list_enabled: Optional[bool] = None

    class Config:
        from_attributes = True


class SitePage(BaseModel):
    page: str
    site: WeddingSitePublic


class CustomDomainUpdate(BaseModel):
    custom_domain: Optional[str] = None


class SubdomainAvailability(BaseModel):
    available: bool
    subdomain: str
