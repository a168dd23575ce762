"""Embedding FastAPI application for the SMS client."""
