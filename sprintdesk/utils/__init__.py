"""Shared helpers for Sprintdesk."""
