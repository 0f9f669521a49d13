"""Contextual tool definitions and their registry."""
