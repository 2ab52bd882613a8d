"""Pydantic schemas for request parameters."""
