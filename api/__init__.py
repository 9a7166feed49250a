"""
API package - FastAPI backend.
"""
