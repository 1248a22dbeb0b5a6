"""src/urlkit/utils/__init__.py

Internal helpers shared by the urlkit components.
"""
