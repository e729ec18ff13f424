from sqlalchemy import Column, Integer, String, DateTime, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    people = relationship(
        "Person", back_populates="tenant", cascade="all, delete-orphan"
    )
    tasks = relationship("Task", back_populates="tenant", cascade="all, delete-orphan")

    # Account names are unique regardless of case
    __table_args__ = (
        Index("uq_tenant_name_lower", func.lower(name), unique=True),
    )

    @classmethod
    def find_by_name(cls, db_session, name: str):
        """Find tenant by account name, case-insensitively"""
        return (
            db_session.query(cls)
            .filter(func.lower(cls.name) == name.strip().lower())
            .first()
        )
