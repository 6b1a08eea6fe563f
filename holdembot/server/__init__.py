"""
holdembot Server - FastAPI service boundary over one table
"""

from holdembot.server.app import app, create_app

__all__ = ["app", "create_app"]
