"""Interfaces for services resolved through the container."""

from .logger import ILogger

__all__ = ["ILogger"]
