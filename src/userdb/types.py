"""Shared types for the userdb package."""

Params = tuple | list | dict
