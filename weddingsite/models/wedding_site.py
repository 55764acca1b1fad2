"""
Wedding Site Model

One couple's site. Served at /site/{subdomain}, and at custom_domain once
the couple points their DNS at the edge.
"""
import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from weddingsite.db.base_class import Base


class WeddingSite(Base):
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)

    # ── Routing ──
    subdomain = Column(String(63), unique=True, nullable=False, index=True)
    custom_domain = Column(String(255), unique=True, nullable=True, index=True)  # lowercased, no scheme

    # ── Couple ──
    partner1_name = Column(String(255), nullable=False)
    partner2_name = Column(String(255), nullable=False)
    partner1_email = Column(String(255), nullable=True)
    partner2_email = Column(String(255), nullable=True)

    # ── Event ──
    wedding_date = Column(DateTime(timezone=True), nullable=False)
    wedding_time = Column(String(32), nullable=True)
    venue_name = Column(String(255), nullable=False)
    venue_address = Column(String(500), nullable=False)
    venue_city = Column(String(255), nullable=False)
    venue_state = Column(String(255), nullable=False)
    venue_zip = Column(String(32), nullable=False)
    venue_country = Column(String(255), default="United States")

    # ── Look & copy ──
    primary_color = Column(String(7), default="#d946ef")
    secondary_color = Column(String(7), default="#f3f4f6")
    welcome_message = Column(Text, nullable=True)
    about_us_story = Column(Text, nullable=True)

    # ── Feature toggles ──
    rsvp_enabled = Column(Boolean, default=True)
    gifts_enabled = Column(Boolean, default=True)
    accommodation_enabled = Column(Boolean, default=False)
    transport_enabled = Column(Boolean, default=False)
    guest_list_enabled = Column(Boolean, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    owner = relationship("User", back_populates="wedding_sites")
