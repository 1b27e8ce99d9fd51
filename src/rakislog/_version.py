"""
Fallback version module.

Release builds overwrite __version__; editable or source checkouts keep this
default so imports work.
"""

__version__ = "0.1.0"
