"""Telegram presentation layer for the wardrobe session."""
