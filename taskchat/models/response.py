"""
Response models returned by the chat interpreter
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class BotResponse(BaseModel):
    """
    Interpreter response

    message is what to show the user: the canonical command, help text
    or the date format help. data carries the machine-readable parts
    (intent, command, date_time and its defaulted flags).
    """
    message: str
    success: bool = True
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def command(self) -> Optional[str]:
        return self.data.get("command")

    @property
    def needs_clarification(self) -> bool:
        return bool(self.data.get("needs_clarification"))


class ErrorResponse(BaseModel):
    """Error response model"""
    message: str
    error_code: Optional[str] = None
    details: Optional[dict] = None

    def to_bot_response(self, data: Optional[Dict[str, Any]] = None) -> BotResponse:
        """Failed BotResponse with this message; error_code is added to data"""
        payload = dict(data or {})
        if self.error_code:
            payload["error_code"] = self.error_code
        return BotResponse(message=self.message, success=False, data=payload)
