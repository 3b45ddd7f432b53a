"""Configuration module for the frame rate tools."""

from .settings import AppSettings

__all__ = ["AppSettings"]
