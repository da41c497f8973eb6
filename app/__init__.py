"""Tingle social network API.

Sub-packages follow the layering used throughout the code base: ``domain``
holds entities and errors, ``application`` the use cases, ``infrastructure``
persistence and token handling, and ``interfaces`` the HTTP surface.
"""
