"""
Error handling utilities
"""

from typing import Optional
from taskchat.models.response import ErrorResponse
from taskchat.utils.logger import logger


class TaskChatError(Exception):
    """Base exception for interpreter errors"""
    pass


class DateParseError(TaskChatError):
    """Date/time text could not be parsed; the message is the format help"""
    def __init__(self, message: str, text: Optional[str] = None):
        self.message = message
        self.text = text
        super().__init__(self.message)


class ValidationError(TaskChatError):
    """Validation error exception"""
    pass


class CommandFormatError(ValidationError):
    """Synthesized command does not satisfy the canonical grammar"""
    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"{reason}: {command!r}")


def handle_error(error: Exception) -> ErrorResponse:
    """
    Handle error and return user-friendly message
    
    Args:
        error: Exception to handle
        
    Returns:
        ErrorResponse with user-friendly message
    """
    if isinstance(error, DateParseError):
        # Expected on the chat path, not worth a traceback
        logger.info(f"Could not parse date/time: {error.text!r}")
        return ErrorResponse(
            message=error.message,
            error_code="date_parse",
            details={"text": error.text},
        )
    
    logger.error(f"Error occurred: {error}", exc_info=True)
    
    if isinstance(error, CommandFormatError):
        return ErrorResponse(
            message=f"Command format issue: {error.command}",
            error_code="command_format",
            details={"reason": error.reason},
        )
    
    if isinstance(error, ValidationError):
        return ErrorResponse(
            message=f"Validation error: {str(error)}",
        )
    
    # Generic error message
    return ErrorResponse(
        message="Oops! Something went wrong. Please try rephrasing your request.",
    )


def format_error_message(error: Exception) -> str:
    """
    Format error message for user
    
    Args:
        error: Exception to format
        
    Returns:
        User-friendly error message
    """
    error_response = handle_error(error)
    return error_response.message
