"""
Image classifier interface.

How a frame is analyzed is the classifier's business. The engine only
asks one question: does this frame contain a cat, at a given confidence?
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging
import random

logger = logging.getLogger(__name__)


class ImageClassifier(ABC):
    """Abstract interface for cat detection."""

    @abstractmethod
    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """
        Decide whether an image shows a cat.

        Args:
            image: Camera frame in whatever form the classifier accepts
            confidence_threshold: Minimum confidence, as a percentage (0-100)

        Returns:
            True if a cat was found at or above the threshold
        """
        pass


class FakeImageClassifier(ImageClassifier):
    """
    Classifier that guesses.

    Useful for demos and for exercising the host without a real model.
    Pass a seeded Random for reproducible guesses.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        cat = self._rng.random() < 0.5
        logger.debug(f"Guessed cat={cat} (threshold={confidence_threshold})")
        return cat
