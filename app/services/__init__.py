"""Services for the report normalizer."""

from .normalizer import NormalizerService

__all__ = ["NormalizerService"]
