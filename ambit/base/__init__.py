"""Base classes for ambit CLI commands."""

from .base_command import BaseCommand

__all__ = ["BaseCommand"]
