"""Pydantic schemas for API request/response."""

from .requests import ValueWrite

__all__ = ["ValueWrite"]
