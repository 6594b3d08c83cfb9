# -*- coding: utf-8 -*-
"""
Configuration of the Event Hub API, read from environment variables
(a local .env file is loaded first when present).
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

    # SQLite by default; any SQLAlchemy URL works
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./eventhub.db")

    # Base used to build absolute links (event pages, api urls)
    PUBLIC_URL = os.environ.get("PUBLIC_URL", "http://localhost:8000")
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5700")

    # Email (Resend)
    RESEND_API_KEY = os.environ.get("RESEND_API_KEY", "")
    MAIL_FROM = os.environ.get("MAIL_FROM", "Event Hub <noreply@example.com>")
    CONTACT_EMAIL = os.environ.get("CONTACT_EMAIL", "events@example.com")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # None logs to stderr

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"


settings = Settings()
