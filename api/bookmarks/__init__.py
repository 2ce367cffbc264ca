"""
Bookmarks feature: validation, sanitization, persistence and routes.
"""
