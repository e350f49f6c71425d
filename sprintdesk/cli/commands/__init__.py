"""Sprintdesk CLI command groups."""
