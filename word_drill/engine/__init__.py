"""Learning queue engine."""

from .learning_engine import LearningEngine
from .learning_queue import LearningQueue
from .progression import SetProgression

__all__ = ["LearningEngine", "LearningQueue", "SetProgression"]
