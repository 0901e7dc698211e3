from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage
    data_dir: str = "./data"
    events_file: str = "events.json"
    volunteers_file: str = "volunteers.json"

    # Gate codes
    volunteer_gate_code: str = "1957"
    organizer_gate_code: str = "5791"

    # Email
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_from: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    mail_relay_url: Optional[str] = None
    mail_timeout: float = 10.0

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Environment
    environment: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
