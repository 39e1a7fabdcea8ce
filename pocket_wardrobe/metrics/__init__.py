"""Prometheus metrics for the wardrobe session and bot."""

from .prometheus_exporter import (
    active_sessions,
    outfits_generated_total,
    renders_total,
    upload_requests_total,
)

__all__ = [
    "active_sessions",
    "outfits_generated_total",
    "renders_total",
    "upload_requests_total",
]
