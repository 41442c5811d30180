"""Markdown bodies for the crm-base catalog, imported on first read."""
