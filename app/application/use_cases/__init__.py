"""Aggregate application use cases."""

from .users import sign_in_with_oauth

__all__ = ["sign_in_with_oauth"]
