"""
API package.

FastAPI surface for the advisory chat.
"""
