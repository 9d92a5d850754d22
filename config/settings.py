"""
Application settings and configuration

This file contains all the settings for the email generator.
Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()


class Settings:
    """
    Application configuration settings

    You can change these values by setting environment variables in a .env file.
    """

    # ============================================================
    # Gemini API Settings
    # ============================================================
    # Google's Gemini AI writes the outreach email variations.
    # GOOGLE_API_KEY is accepted as well so an existing key can be reused.
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", ""))
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
    # Ask Gemini for a JSON response body instead of free text
    LLM_JSON_MODE = os.getenv("LLM_JSON_MODE", "true").lower() == "true"

    # ============================================================
    # Template Generation
    # ============================================================
    TEMPLATE_COUNT = int(os.getenv("TEMPLATE_COUNT", "3"))  # Variations per request
    TARGET_YEAR = int(os.getenv("TARGET_YEAR", "2025"))  # Year quoted in the pitch

    # ============================================================
    # Sender Details
    # ============================================================
    # Who signs the email, and the values the form starts with
    SENDER_NAME = os.getenv("SENDER_NAME", "Nazmul Hossain")
    AGENCY_NAME = os.getenv("AGENCY_NAME", "Sera Programmer")
    DEFAULT_REPLY_EMAIL = os.getenv("DEFAULT_REPLY_EMAIL", "olova.dev@gmail.com")
    DEFAULT_WEBSITE_LINK = os.getenv("DEFAULT_WEBSITE_LINK", "https://seraprogrammer.com/")
    DEFAULT_PORTFOLIO_LINK = os.getenv("DEFAULT_PORTFOLIO_LINK", "https://codervai.vercel.app/")

    # ============================================================
    # Logging Settings
    # ============================================================
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "logs/app.log")  # Empty string disables file logging


# Global settings instance
settings = Settings()
