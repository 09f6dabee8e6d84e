"""
API v1 package.

Contains versioned API routes for the webinar seat booking API.
"""

from seatbooking.api.v1.routes import router

__all__ = ["router"]
