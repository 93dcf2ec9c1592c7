"""
Configuration settings for the resume refresh workflow.

Values here are defaults; the optional environment variables listed below
and the command-line flags override them.
"""

from __future__ import annotations

import os

# Environment variables holding the account secrets (both mandatory)
USERNAME_ENV = "NAUKRI_USERNAME"
PASSWORD_ENV = "NAUKRI_PASSWORD"

# Optional overrides
ASSETS_DIR_ENV = "RESUMEREFRESH_ASSETS_DIR"
SCREENSHOT_ENV = "RESUMEREFRESH_SCREENSHOT"
HEADLESS_ENV = "RESUMEREFRESH_HEADLESS"
LOG_LEVEL_ENV = "RESUMEREFRESH_LOG_LEVEL"

# Target application
LOGIN_URL = "https://login.naukri.com/"
HOMEPAGE_URL_PATTERN = r"naukri\.com/mnjuser/homepage"
PROFILE_URL = "https://www.naukri.com/mnjuser/profile"
PROFILE_URL_PATTERN = r"naukri\.com/mnjuser/profile"

# Notification texts
SUCCESS_STATUS_TEXT = "Success"
HEADLINE_SAVED_TEXT = "Resume Headline has been successfully saved."
RESUME_UPLOADED_TEXT = "Resume has been successfully uploaded."

# Timeouts in milliseconds
NAVIGATION_TIMEOUT_MS = 30_000
LOGIN_REDIRECT_TIMEOUT_MS = 30_000
ELEMENT_TIMEOUT_MS = 10_000
HEADLINE_NOTIFICATION_TIMEOUT_MS = 10_000
UPLOAD_NOTIFICATION_TIMEOUT_MS = 15_000

# Delay between locator polling passes, in seconds
POLL_INTERVAL_S = 0.1

# Resume files the portal accepts, matched case-insensitively on the suffix
SUPPORTED_RESUME_EXTENSIONS = (".pdf", ".doc", ".docx", ".rtf")

DEFAULT_ASSETS_DIR = "assets"
DEFAULT_SCREENSHOT_PATH = "error-screenshot.png"

# Browser headless mode
HEADLESS = True

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = "INFO"


def env_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if not value:
        return default
    return value in ("1", "true", "yes", "on")
