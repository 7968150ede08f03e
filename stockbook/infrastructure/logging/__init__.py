"""Logging helpers for the stockbook application."""
