from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from decimal import Decimal
from ..models.enums import CompletionStatus


class ReportPerson(BaseModel):
    id: int
    name: str
    point_goal: int


class TaskSummary(BaseModel):
    task_id: int
    task_title: str
    completed_count: int
    excluded_count: int
    possible_completions: int
    percent_complete: int
    points_per_completion: int
    total_points: int
    total_money: Decimal = Decimal("0.00")


class CompletionDetail(BaseModel):
    task_id: int
    task_title: str
    completed_date: date
    status: CompletionStatus
    points: int
    money: Decimal


class MonthlyReport(BaseModel):
    person: ReportPerson
    year: int
    month: int
    start_date: date
    end_date: date
    total_points: int
    total_money: Decimal
    completion_count: int
    expected_points: Optional[float] = None
    task_summaries: List[TaskSummary]
    completions: List[CompletionDetail]
    progress: int
