"""API access layer for the GolfEzz backend."""

from golfezz.api.http_client import HttpClient

__all__ = ['HttpClient']
