"""Curve profiles and generation settings."""
