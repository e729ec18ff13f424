from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    DateTime,
    ForeignKey,
    Numeric,
    Text,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from ..utils.active_days import parse_active_days


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    is_recurring = Column(Boolean, nullable=False, default=True)
    # Comma separated weekdays, 0=Sunday: "1,3,5"
    active_days = Column(String, nullable=False)
    points = Column(Integer)
    money = Column(Numeric(10, 2))
    display_order = Column(Integer, nullable=False, default=0)

    tenant_id = Column(
        Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    assigned_to_id = Column(
        Integer,
        ForeignKey("people.id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    tenant = relationship("Tenant", back_populates="tasks")
    assigned_to = relationship("Person", back_populates="tasks")
    completions = relationship(
        "TaskCompletion",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="TaskCompletion.completed_date",
    )

    __table_args__ = (
        Index("idx_task_tenant_order", "tenant_id", "display_order"),
        Index("idx_task_assigned", "assigned_to_id"),
    )

    @property
    def active_day_set(self):
        return parse_active_days(self.active_days)
