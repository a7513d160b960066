from .data_structures import (
    AdjacencyList,
    ArrayStack,
    EmptyPriorityQueueError,
    EmptyStackError,
    HashMap,
    PriorityQueue,
    SetView,
    VertexNotFoundError,
)
from .entities import Event, PriorityLevel, User, compare_event_priority

__all__ = [
    'AdjacencyList',
    'ArrayStack',
    'EmptyPriorityQueueError',
    'EmptyStackError',
    'Event',
    'HashMap',
    'PriorityLevel',
    'PriorityQueue',
    'SetView',
    'User',
    'VertexNotFoundError',
    'compare_event_priority',
]
