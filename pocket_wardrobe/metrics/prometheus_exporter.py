"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


renders_total = Counter(
    "wardrobe_renders_total",
    "Total number of full view renders.",
    ["view"],
)

outfits_generated_total = Counter(
    "wardrobe_outfits_generated_total",
    "Total number of generated outfits.",
)

upload_requests_total = Counter(
    "wardrobe_upload_requests_total",
    "Upload requests forwarded to the host.",
    ["kind"],
)

active_sessions = Gauge(
    "wardrobe_active_sessions",
    "Number of in-memory wardrobe sessions.",
)
