"""
REMINDME - In-memory command-line reminder manager
"""

__version__ = "0.1.0"
