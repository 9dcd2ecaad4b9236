"""
Registry Module - Named Screen Schemas.

Components:
    - ScreenRegistry: Central registry mapping screen names to schemas
    - ScreenInfo: Metadata about a registered screen
"""

from list_query.registry.screen_registry import ScreenInfo, ScreenRegistry

__all__ = [
    "ScreenRegistry",
    "ScreenInfo",
]
