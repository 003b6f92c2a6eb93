"""Metadata models, renderers and the sitemap codec."""
