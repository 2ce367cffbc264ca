"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks the feature packages use (DB wiring,
settings, logging). Keep bookmark-specific SQL and rules in `bookmarks/`.
"""
