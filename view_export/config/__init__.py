"""
Configuration package.

Usage:
    from view_export.config import settings
"""

from view_export.config.settings import Settings, settings

__all__ = [
    'Settings',
    'settings',
]
