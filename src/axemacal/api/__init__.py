"""
API package for booking calendar application.
Contains the client for the remote booking service.
"""

from .axema import AuthState, AxemaAPI
from .base_api import BaseAPI

__all__ = ['AuthState', 'AxemaAPI', 'BaseAPI']
