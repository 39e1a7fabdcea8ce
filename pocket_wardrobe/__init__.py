"""Pocket Wardrobe: view-state and rendering engine for a Telegram wardrobe."""

__version__ = "0.1.0"
