"""Sprintdesk command line interface."""
