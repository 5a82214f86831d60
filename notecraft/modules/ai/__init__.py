"""AI client exports."""

from .models import CardPair, CardPairSet
from .client import AIArtifactClient, ArtifactClient

__all__ = ["CardPair", "CardPairSet", "AIArtifactClient", "ArtifactClient"]
