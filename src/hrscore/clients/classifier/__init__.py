"""External workout classifier client."""

from hrscore.clients.classifier.client import ClassifierClient

__all__ = ["ClassifierClient"]
