"""Reporters — plain stream, JSON, Rich terminal."""
