"""Adapters for Discord and the completion service."""
