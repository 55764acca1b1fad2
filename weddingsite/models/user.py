import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func
from sqlalchemy.orm import relationship
from weddingsite.db.base_class import Base


class User(Base):
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(255), nullable=True)
    has_paid = Column(Boolean, default=False, nullable=False)  # one-off platform fee
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    wedding_sites = relationship("WeddingSite", back_populates="owner", cascade="all, delete-orphan")
