"""Application configuration settings."""
from typing import List
from pydantic_settings import BaseSettings
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    app_name: str = "Email Store API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    sqlite_db_path: str = "./data/emails.db"
    
    # API settings
    api_v1_prefix: str = "/api/v1"
    
    # Scheduler settings
    enable_scheduler: bool = True
    spam_check_interval_minutes: int = 60  # How often to reclassify stored mail
    
    # Sender addresses registered as spam filters at startup
    spam_filter_addresses: str = '[]'  # JSON list of addresses
    
    @property
    def spam_filter_addresses_list(self) -> List[str]:
        """Parse spam filter addresses from JSON string."""
        try:
            return json.loads(self.spam_filter_addresses)
        except json.JSONDecodeError:
            return []
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
