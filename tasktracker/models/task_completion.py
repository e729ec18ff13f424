from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import CompletionStatus


class TaskCompletion(Base):
    __tablename__ = "task_completions"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(
        Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False
    )
    completed_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default=CompletionStatus.COMPLETED.value)

    # Audit only
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    task = relationship("Task", back_populates="completions")

    # At most one record per (task, date) cell
    __table_args__ = (
        UniqueConstraint(
            "task_id", "completed_date", name="uq_task_completion_task_date"
        ),
    )
