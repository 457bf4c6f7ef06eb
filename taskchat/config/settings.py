"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")
    
    # Date parsing
    DEFAULT_TASK_HOUR: int = int(os.getenv("DEFAULT_TASK_HOUR", "9"))
    
    # Console entry point only; the core never samples the clock itself
    USER_TIMEZONE_OFFSET: int = int(os.getenv("USER_TIMEZONE_OFFSET", "0"))
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that settings are within supported ranges"""
        errors = []
        
        if not 0 <= cls.DEFAULT_TASK_HOUR <= 23:
            errors.append(f"DEFAULT_TASK_HOUR={cls.DEFAULT_TASK_HOUR}")
        
        if not -12 <= cls.USER_TIMEZONE_OFFSET <= 14:
            errors.append(f"USER_TIMEZONE_OFFSET={cls.USER_TIMEZONE_OFFSET}")
        
        if errors:
            raise ValueError(
                f"Invalid environment variables: {', '.join(errors)}"
            )
        
        return True


# Global settings instance
settings = Settings()
