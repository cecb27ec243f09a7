"""Config package initialization."""

from config.settings import APP_CONFIG, UI_CONFIG

__all__ = ['APP_CONFIG', 'UI_CONFIG']
