"""
Request parsing, response envelope and path table for transports that front txforge.
"""

from txforge.api.envelope import ApiResponse
from txforge.api.routes import Router, dispatch

__all__ = ["ApiResponse", "Router", "dispatch"]
