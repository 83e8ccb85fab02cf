"""Typed services for Jira statuses, status categories, versions, users and sprints."""

__version__ = "0.1.0"