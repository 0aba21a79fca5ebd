"""Top-level package for Django configuration.

Settings modules for each environment and the WSGI/ASGI entry points of
the cospace platform.
"""
