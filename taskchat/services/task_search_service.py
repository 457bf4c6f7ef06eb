"""
Task search service: filter, keyword-match, sort and summarize tasks
"""

import re
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from taskchat.config.constants import MAX_SEARCH_SUGGESTIONS
from taskchat.models.search import FilterBy, SearchCriteria, SearchResult, SortBy
from taskchat.models.task import Priority, Task, TaskType
from taskchat.utils.logger import logger


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison

    Rules:
    - Convert to lowercase
    - Strip whitespace
    - Replace multiple spaces with single space

    Examples:
    - "Finish Report" → "finish report"
    - "finish  report" → "finish report"
    - "  FINISH REPORT  " → "finish report"

    Args:
        text: Task description or keyword

    Returns:
        Normalized text
    """
    if not text:
        return ""
    return re.sub(r'\s+', ' ', text.lower().strip())


FILTERS: Dict[FilterBy, Callable[[Task], bool]] = {
    FilterBy.ALL: lambda task: True,
    FilterBy.COMPLETED: lambda task: task.is_done,
    FilterBy.PENDING: lambda task: not task.is_done,
    FilterBy.TODO: lambda task: task.task_type == TaskType.TODO,
    FilterBy.DEADLINE: lambda task: task.task_type == TaskType.DEADLINE,
    FilterBy.EVENT: lambda task: task.task_type == TaskType.EVENT,
    FilterBy.LOW_PRIORITY: lambda task: task.priority == Priority.LOW,
    FilterBy.NORMAL_PRIORITY: lambda task: task.priority == Priority.NORMAL,
    FilterBy.HIGH_PRIORITY: lambda task: task.priority == Priority.HIGH,
    FilterBy.URGENT_PRIORITY: lambda task: task.priority == Priority.URGENT,
    FilterBy.CRITICAL_PRIORITY: lambda task: task.priority == Priority.CRITICAL,
}


def _date_key(task: Task) -> Tuple[bool, datetime]:
    # Tasks without a date sort after dated ones
    return (task.date_time is None, task.date_time or datetime.min)


SORT_KEYS: Dict[SortBy, Callable[[Task], object]] = {
    SortBy.DATE: _date_key,
    SortBy.DESCRIPTION: lambda task: task.description.lower(),
    SortBy.TYPE: lambda task: task.task_type.rank,
    SortBy.COMPLETION: lambda task: task.is_done,
    SortBy.PRIORITY: lambda task: -task.priority.level,
}


class TaskSearchService:
    """Service for searching, filtering and sorting a read-only task collection"""

    def __init__(self):
        """Initialize task search service"""
        self.logger = logger

    def search(self, tasks: Sequence[Task], criteria: SearchCriteria) -> SearchResult:
        """
        Search tasks

        Algorithm:
        1. Filter by status, type or priority
        2. Filter by date range (tasks without a date are dropped)
        3. Filter by keyword
        4. Sort (stable); ascending=False reverses the order
        5. Build a summary

        Args:
            tasks: Task collection (not modified)
            criteria: Search criteria

        Returns:
            SearchResult
        """
        matches = [task for task in tasks if FILTERS[criteria.filter](task)]

        if criteria.has_date_range():
            matches = [
                task for task in matches
                if self.matches_date_range(task, criteria.date_from, criteria.date_to)
            ]

        if criteria.has_keyword():
            matches = [task for task in matches if self.matches_keyword(task, criteria.keyword)]

        matches = sorted(
            matches,
            key=SORT_KEYS[criteria.sort_by],
            reverse=not criteria.ascending,
        )

        summary = self.create_summary(criteria, len(matches), len(tasks))
        self.logger.debug(f"[TaskSearch] {summary}")

        return SearchResult(
            tasks=matches,
            total_found=len(matches),
            total_available=len(tasks),
            summary=summary,
        )

    def quick_search(self, tasks: Sequence[Task], keyword: Optional[str]) -> SearchResult:
        """Keyword search with default filter (all) and sort (date ascending)"""
        return self.search(tasks, SearchCriteria(keyword=keyword))

    def matches_date_range(
        self,
        task: Task,
        date_from: Optional[date],
        date_to: Optional[date],
    ) -> bool:
        """Inclusive check on the date component; todos never match"""
        if task.date_time is None:
            return False

        task_date = task.date_time.date()
        if date_from is not None and task_date < date_from:
            return False
        if date_to is not None and task_date > date_to:
            return False
        return True

    def matches_keyword(self, task: Task, keyword: str) -> bool:
        """
        Keyword matching

        Strategies, first hit wins:
        1. Category marker: "#work" / "@home" (or a bare word naming a tag
           or context) matches the task's categories
        2. Phrase: the description contains the keyword
        3. Words: every keyword word is part of some description word

        Args:
            task: Task to check
            keyword: Search keyword

        Returns:
            True if the task matches
        """
        search = normalize_text(keyword)
        description = normalize_text(task.description)

        if self._matches_category(task, search):
            return True

        if search in description:
            return True

        description_words = description.split(" ")
        return all(
            any(word in description_word for description_word in description_words)
            for word in search.split(" ")
        )

    def _matches_category(self, task: Task, search: str) -> bool:
        if search.startswith("#"):
            return task.category.has_tag(search)
        if search.startswith("@"):
            return task.category.has_context(search)
        return task.category.has_tag(search) or task.category.has_context(search)

    def create_summary(self, criteria: SearchCriteria, found: int, total: int) -> str:
        """
        Build a summary like
        'Found 2 task(s) out of 5 (keyword: "work", filter: pending), sorted by priority'
        """
        summary = f"Found {found} task(s)"
        if found < total:
            summary += f" out of {total}"

        filters = []
        if criteria.has_keyword():
            filters.append(f'keyword: "{criteria.keyword}"')

        if criteria.filter != FilterBy.ALL:
            filters.append(f"filter: {criteria.filter.value}")

        if criteria.date_from is not None and criteria.date_to is not None:
            filters.append(f"date range: {criteria.date_from} to {criteria.date_to}")
        elif criteria.date_from is not None:
            filters.append(f"from: {criteria.date_from}")
        elif criteria.date_to is not None:
            filters.append(f"until: {criteria.date_to}")

        if filters:
            summary += f" ({', '.join(filters)})"

        if criteria.sort_by != SortBy.DATE or not criteria.ascending:
            summary += f", sorted by {criteria.sort_by.value}"
            if not criteria.ascending:
                summary += " (descending)"

        return summary

    def get_search_suggestions(self, tasks: Sequence[Task], partial: str) -> List[str]:
        """
        Suggest description words that extend a partial keyword

        Args:
            tasks: Task collection
            partial: Partial keyword

        Returns:
            Up to MAX_SEARCH_SUGGESTIONS words, alphabetically
        """
        prefix = partial.lower()
        suggestions = {
            word
            for task in tasks
            for word in task.description.lower().split()
            if word.startswith(prefix) and len(word) > len(partial)
        }
        return sorted(suggestions)[:MAX_SEARCH_SUGGESTIONS]
