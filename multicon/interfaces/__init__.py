"""
multicon.interfaces - User interfaces for MultiCon

This package contains the interfaces for interacting with a MultiCon game.
"""

# Don't import anything here to avoid circular imports
__all__ = []
