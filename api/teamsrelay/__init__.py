"""Relay Chromatic webhooks to Microsoft Teams."""

__version__ = "0.1.0"
