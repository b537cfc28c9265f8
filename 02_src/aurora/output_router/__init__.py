"""OutputRouter module."""

from .router import IOutputRouter, OutputRouter

__all__ = ["IOutputRouter", "OutputRouter"]
