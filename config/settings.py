"""Application configuration and settings management."""
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants import Limits


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Data/auth backend: "sqlite" for the local database, "supabase" for the hosted project
    backend: str = "sqlite"

    # Supabase Configuration
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    # Local SQLite database
    database_path: str = "data/marketplace.db"
    seed_demo_data: bool = True
    seed_data_path: str = "config/seed_data.yaml"

    # Flask
    secret_key: str = "dev-secret-key-change-in-production"

    # Landing page sections
    featured_jobs_limit: int = Limits.FEATURED_JOBS
    top_freelancers_limit: int = Limits.TOP_FREELANCERS
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def is_supabase_configured(self) -> bool:
        """Check if Supabase credentials are present."""
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def database_file(self) -> Path:
        """Database path as a Path object."""
        return Path(self.database_path)


# Global settings instance
settings = Settings()
