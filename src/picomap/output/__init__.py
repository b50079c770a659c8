"""Reporters for a rendered map: plain rows, JSON, Rich terminal preview."""
