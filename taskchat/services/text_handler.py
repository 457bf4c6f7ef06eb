"""
Text message handler
"""

import re
from taskchat.config.constants import MAX_MESSAGE_LENGTH
from taskchat.utils.logger import logger

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


class TextHandler:
    """Handler for chat text messages"""
    
    def __init__(self):
        """Initialize text handler"""
        self.logger = logger
    
    def process(self, text: str) -> str:
        """
        Process text message
        
        Line breaks are kept; spaces and tabs inside each line are
        collapsed and control characters removed.
        
        Args:
            text: Text message
            
        Returns:
            Processed text (trimmed and normalized)
        """
        if not text:
            return ""
        
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        cleaned = []
        for line in lines:
            line = _CONTROL_CHARS.sub("", line)
            cleaned.append(" ".join(line.split()))
        
        processed = "\n".join(cleaned).strip()
        
        self.logger.debug(f"Processed text: {processed}")
        
        return processed
    
    def validate(self, text: str) -> bool:
        """
        Validate text message
        
        Args:
            text: Text message
            
        Returns:
            True if valid, False otherwise
        """
        if not text or not text.strip():
            return False
        
        if len(text) > MAX_MESSAGE_LENGTH:
            return False
        
        return True
