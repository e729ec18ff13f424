from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Person(Base):
    __tablename__ = "people"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    color = Column(String)
    point_goal = Column(Integer)  # Monthly target, unset means no goal

    tenant_id = Column(
        Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tenant = relationship("Tenant", back_populates="people")
    tasks = relationship(
        "Task",
        back_populates="assigned_to",
        order_by="[Task.display_order, Task.id]",
    )

    __table_args__ = (
        UniqueConstraint("tenant_id", "name", name="uq_person_tenant_name"),
    )
