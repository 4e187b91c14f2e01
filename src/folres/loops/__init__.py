"""Saturation loop and its supporting structures."""

from .knowledge import KnowledgeBase
from .queue import ClauseQueue, QueueEntry
from .resolver import Resolver, ResolverStats

__all__ = [
    "KnowledgeBase",
    "ClauseQueue", "QueueEntry",
    "Resolver", "ResolverStats",
]
