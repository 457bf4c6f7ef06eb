"""
Search criteria and result models
"""

from datetime import date
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from taskchat.models.task import Task


class SortBy(str, Enum):
    """Sort keys"""
    DATE = "date"
    DESCRIPTION = "description"
    TYPE = "type"
    COMPLETION = "completion"
    PRIORITY = "priority"


class FilterBy(str, Enum):
    """Status, type and priority filters"""
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    LOW_PRIORITY = "low_priority"
    NORMAL_PRIORITY = "normal_priority"
    HIGH_PRIORITY = "high_priority"
    URGENT_PRIORITY = "urgent_priority"
    CRITICAL_PRIORITY = "critical_priority"


class SearchCriteria(BaseModel):
    """Search criteria for advanced task searching"""

    model_config = ConfigDict(populate_by_name=True)

    keyword: Optional[str] = None
    filter: FilterBy = FilterBy.ALL
    sort_by: SortBy = Field(SortBy.DATE, alias="sortBy")
    ascending: bool = True
    date_from: Optional[date] = Field(None, alias="dateFrom")
    date_to: Optional[date] = Field(None, alias="dateTo")

    def has_keyword(self) -> bool:
        return bool(self.keyword and self.keyword.strip())

    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None


class SearchResult(BaseModel):
    """Search result with metadata"""

    tasks: List[Task] = Field(default_factory=list)
    total_found: int = 0
    total_available: int = 0
    summary: str = ""
