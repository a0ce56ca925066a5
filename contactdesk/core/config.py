"""Configuration settings for the contact desk API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_PREFIX: Path prefix every router is mounted under
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        SUPABASE_URL: Supabase project URL
        SUPABASE_SERVICE_ROLE_KEY: Service role key used by the API
        SUPABASE_JWT_SECRET: Secret used to verify user access tokens
        ADMIN_ROLE: Profile role that grants admin access
    """
    def __init__(self):
        self.API_PREFIX = os.getenv("API_PREFIX", "/api")
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Contact Desk API")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Supabase Settings
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
        self.SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET")

        # Tables
        self.MESSAGES_TABLE = os.getenv("MESSAGES_TABLE", "messages")
        self.MESSAGE_NOTES_TABLE = os.getenv("MESSAGE_NOTES_TABLE", "message_notes")
        self.USER_PROFILES_TABLE = os.getenv("USER_PROFILES_TABLE", "user_profiles")

        # Access control
        self.ADMIN_ROLE = os.getenv("ADMIN_ROLE", "admin")

        # CORS
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


settings = Settings()
