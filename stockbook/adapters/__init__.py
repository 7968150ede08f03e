"""Entry-point adapters (CLI and dashboard)."""
