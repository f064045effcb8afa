"""
Startup Namer: AI startup name suggestions with .com availability checks.
"""

__version__ = "0.1.0"
