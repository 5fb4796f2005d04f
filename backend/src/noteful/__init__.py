"""
Noteful Backend - Personal Note Taking API

Folders, notes and tags owned by authenticated users, behind a small REST API.
"""

__version__ = "1.0.0"
