"""
Tests for task type resolver
"""

from taskchat.models.task import TaskType
from taskchat.services.task_type_resolver import (
    EVENT_SPLIT_PATTERNS,
    find_time_start_index,
    remove_command_words,
    strip_linking_word,
)


def test_is_event_by_noun(resolver):
    """Test event nouns make an event"""
    assert resolver.is_event("meeting tomorrow") is True
    assert resolver.is_event("dentist appointments") is True


def test_is_event_call_needs_time(resolver):
    """Test 'call' is an event only with a time indicator"""
    assert resolver.is_event("call mom") is False
    assert resolver.is_event("call mom at 3pm") is True


def test_is_event_word_boundaries(resolver):
    """Test nouns inside other words do not count"""
    assert resolver.is_event("classify photos") is False
    assert resolver.is_event("recall the list") is False


def test_is_deadline(resolver):
    """Test deadline detection rules"""
    assert resolver.is_deadline("deadline project") is True
    assert resolver.is_deadline("project due friday") is True
    assert resolver.is_deadline("pay bills by tomorrow") is True
    assert resolver.is_deadline("stand by me") is False


def test_is_deadline_verbs_need_time(resolver):
    """Test submit/finish/complete need a time indicator"""
    assert resolver.is_deadline("submit report") is False
    assert resolver.is_deadline("submit report tomorrow") is True
    assert resolver.is_deadline("finish essay by 5pm") is True


def test_resolve_event_split(resolver):
    """Test event text splits at the earliest time indicator"""
    decision = resolver.resolve("meeting tomorrow at 2pm", TaskType.EVENT)
    assert decision.task_type == TaskType.EVENT
    assert decision.description == "meeting"
    assert decision.time_phrase == "tomorrow at 2pm"
    assert decision.needs_clarification is False


def test_resolve_event_strips_linking_word(resolver):
    """Test a leading 'at' is removed from the time phrase"""
    decision = resolver.resolve("call mom at 3pm", TaskType.EVENT)
    assert decision.description == "call mom"
    assert decision.time_phrase == "3pm"


def test_resolve_bare_meeting_needs_clarification(resolver):
    """Test a bare event word asks for details"""
    assert resolver.resolve("meeting", TaskType.EVENT).needs_clarification is True
    assert resolver.resolve("schedule meeting", TaskType.EVENT).needs_clarification is True


def test_resolve_strong_event_without_time(resolver):
    """Test a strong event word without a time asks for details"""
    decision = resolver.resolve("interview with google", TaskType.EVENT)
    assert decision.needs_clarification is True
    assert decision.task_type == TaskType.EVENT


def test_resolve_event_degrades_to_todo(resolver):
    """Test weak event texts without a time become todos"""
    assert resolver.resolve("call mom", TaskType.EVENT).task_type == TaskType.TODO
    decision = resolver.resolve("team lunch", TaskType.EVENT)
    assert decision.task_type == TaskType.TODO
    assert decision.description == "team lunch"


def test_resolve_deadline_by(resolver):
    """Test deadline text splits at 'by'"""
    decision = resolver.resolve("deadline project by friday", TaskType.DEADLINE)
    assert decision.task_type == TaskType.DEADLINE
    assert decision.description == "project"
    assert decision.time_phrase == "friday"


def test_resolve_deadline_due(resolver):
    """Test a single 'due' splits description from time"""
    decision = resolver.resolve("report due friday", TaskType.DEADLINE)
    assert decision.description == "report"
    assert decision.time_phrase == "friday"


def test_resolve_deadline_multiple_due(resolver):
    """Test two 'due' words: text between them is the description"""
    decision = resolver.resolve("assignment due homework due monday", TaskType.DEADLINE)
    assert decision.description == "homework"
    assert decision.time_phrase == "monday"


def test_resolve_deadline_strong_word_without_time(resolver):
    """Test submit without a time asks for details"""
    decision = resolver.resolve("submit report", TaskType.DEADLINE)
    assert decision.needs_clarification is True
    assert decision.task_type == TaskType.DEADLINE


def test_resolve_bare_deadline_needs_clarification(resolver):
    """Test 'deadline' alone asks for details"""
    assert resolver.resolve("deadline", TaskType.DEADLINE).needs_clarification is True


def test_resolve_deadline_with_time_phrase(resolver):
    """Test 'finish essay by tomorrow 5pm'"""
    decision = resolver.resolve("finish essay by tomorrow 5pm", TaskType.DEADLINE)
    assert decision.description == "finish essay"
    assert decision.time_phrase == "tomorrow 5pm"


def test_resolve_todo_removes_command_word(resolver):
    """Test todo resolution drops a leading command word"""
    decision = resolver.resolve("add buy milk", TaskType.TODO)
    assert decision.task_type == TaskType.TODO
    assert decision.description == "buy milk"


def test_remove_command_words_first_only():
    """Test only one command word is removed"""
    assert remove_command_words("add new task") == "new task"
    assert remove_command_words("Create report") == "report"
    assert remove_command_words("address book") == "address book"


def test_find_time_start_index_skips_start():
    """Test an indicator at index 0 is not a split point"""
    assert find_time_start_index("tomorrow meeting", EVENT_SPLIT_PATTERNS) == -1
    assert find_time_start_index("lunch tomorrow", EVENT_SPLIT_PATTERNS) == 6


def test_find_time_start_index_earliest():
    """Test the earliest matching indicator wins"""
    text = "standup on monday at 9am"
    assert find_time_start_index(text, EVENT_SPLIT_PATTERNS) == text.index("on")


def test_strip_linking_word():
    """Test linking words are removed once from the front"""
    assert strip_linking_word("at 3pm") == "3pm"
    assert strip_linking_word(" on monday ") == "monday"
    assert strip_linking_word("tomorrow at 5pm") == "tomorrow at 5pm"
