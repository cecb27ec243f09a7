"""Configuration management for the enrolment dashboard."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

_DEBUG = os.getenv("DEBUG", "False").lower() == "true"

# App configuration
APP_CONFIG = {
    "title": "Canadian University Enrolment Dashboard",
    "debug": _DEBUG,
    "host": os.getenv("HOST", "127.0.0.1"),
    "port": int(os.getenv("PORT", "8050")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    # Missing translation keys raise in strict mode, otherwise the key itself is shown
    "strict_translations": os.getenv("STRICT_TRANSLATIONS", str(_DEBUG)).lower() == "true",
    "footer_text": "SEG3125 - Assignment 5 - Interactive Dashboard",
}

# UI configuration
UI_CONFIG = {
    "font_family": "Open Sans, sans-serif",
    "chart_height": 300,
    "card_header_style": {
        "font-family": 'Open Sans',
        "font-weight": "600",
        "font-size": "18px"
    },
    "subtitle_style": {
        "font-family": 'Open Sans',
        "font-size": "13px",
        "color": "#6b7280"
    },
    "toggle_style": {
        "font-family": 'Open Sans',
        "font-weight": "600"
    }
}
