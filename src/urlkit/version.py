"""src/urlkit/version.py

Version information for urlkit.
"""

__version__ = "0.1.0"
