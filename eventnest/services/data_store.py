"""
In-Memory Data Store for EventNest

This module demonstrates:
1. Composition: application state assembled from the custom containers
2. Data Structures: HashMap, PriorityQueue, AdjacencyList, ArrayStack

State layout:
- users:          HashMap  user_id -> User
- events:         HashMap  event_id -> Event
- daily_events:   HashMap  user_id -> HashMap(date -> PriorityQueue of Event)
- friendships:    AdjacencyList of user ids; a friendship is two directed edges
- history:        ArrayStack of view names for back-navigation

Author: EventNest Team
"""

import logging

from eventnest.models.data_structures import AdjacencyList, ArrayStack, HashMap, PriorityQueue, SetView
from eventnest.models.entities import User, compare_event_priority

logger = logging.getLogger(__name__)


DEMO_USERS = (
    ('u001', 'alice', '123456'),
    ('u002', 'bob', 'pwd123'),
    ('u003', 'cathy', 'abcxyz'),
    ('u004', 'dylan', '456456'),
)

DEMO_FRIENDSHIPS = (
    ('u001', 'u002'),
    ('u002', 'u003'),
    ('u002', 'u004'),
)


class DataStore:
    """
    Data Store Class - Holds all application state in memory

    OOP Concepts:
    - ENCAPSULATION: containers are private; callers go through methods
    - ABSTRACTION: managers never touch the containers directly
    """

    def __init__(self, initial_capacity=HashMap.DEFAULT_INITIAL_CAPACITY,
                 load_factor=HashMap.DEFAULT_LOAD_FACTOR):
        self._initial_capacity = initial_capacity
        self._load_factor = load_factor
        self._users = self._new_map()
        self._events = self._new_map()
        self._daily_events = self._new_map()
        self._friendships = AdjacencyList()
        self._history = ArrayStack()

    def _new_map(self):
        return HashMap(self._initial_capacity, self._load_factor)

    def seed_demo_data(self):
        """Load the four demo accounts and their friendships."""
        for user_id, username, password in DEMO_USERS:
            self.add_user(User.create(user_id, username, password))
        for first, second in DEMO_FRIENDSHIPS:
            self.add_friend_relation(first, second)
        logger.info("Seeded %d demo users", len(DEMO_USERS))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def add_user(self, user):
        self._users.put(user.user_id, user)
        self._friendships.put_if_absent(user.user_id)

    def get_user(self, user_id):
        """Return the User with user_id, or None."""
        return self._users.get(user_id)

    def find_user_by_username(self, username):
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def all_users(self):
        return self._users.values()

    def user_count(self):
        return self._users.size()

    # ------------------------------------------------------------------
    # Friendships
    # ------------------------------------------------------------------

    def add_friend_relation(self, user_id1, user_id2):
        """
        Record a mutual friendship.

        Returns:
            bool: True if at least one direction was new
        """
        forward = self._friendships.add_edge(user_id1, user_id2)
        backward = self._friendships.add_edge(user_id2, user_id1)
        return forward or backward

    def remove_friend_relation(self, user_id1, user_id2):
        forward = self._friendships.remove_edge(user_id1, user_id2)
        backward = self._friendships.remove_edge(user_id2, user_id1)
        return forward or backward

    def are_friends(self, user_id1, user_id2):
        return self._friendships.contains_edge(user_id1, user_id2)

    def get_friend_ids(self, user_id):
        """Return the user's friend ids; an empty view for unknown users."""
        if not self._friendships.contains_vertex(user_id):
            return SetView()
        return self._friendships.get_neighbors(user_id)

    def recommend_friends(self, user_id):
        """
        Suggest friends-of-friends.

        Algorithm:
        1. Walk each direct friend's neighbor list
        2. Keep ids that are neither the user nor already a friend
        3. Preserve first-seen order, no duplicates

        Returns:
            list: Recommended user ids
        """
        direct_friends = self.get_friend_ids(user_id)
        recommended = SetView()
        for friend_id in direct_friends:
            for candidate in self._friendships.get_neighbors(friend_id):
                if candidate != user_id and candidate not in direct_friends:
                    recommended.add(candidate)
        return recommended.to_list()

    def friendship_graph(self):
        return self._friendships

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_event(self, user_id, event):
        """File event under the owner's day queue and the global id index."""
        self._events.put(event.event_id, event)
        self._daily_events.put_if_absent(user_id, self._new_map())
        days = self._daily_events.get(user_id)
        days.put_if_absent(event.day, PriorityQueue(compare_event_priority))
        days.get(event.day).add(event)
        logger.info("AddEvent: user_id=%s, title=%s", user_id, event.title)

    def get_event_by_id(self, event_id):
        return self._events.get(event_id)

    def search_events_by_title(self, title):
        """Case-insensitive substring search over every event title."""
        needle = title.lower()
        return [event for event in self._events.values() if needle in event.title.lower()]

    def get_user_events_by_day(self, user_id, day):
        """
        Return the user's events on day, highest priority first.

        The day's queue is read through to_list(), so it is left untouched.
        """
        days = self._daily_events.get(user_id)
        if days is None:
            return []
        queue = days.get(day)
        if queue is None:
            return []
        return queue.to_list()

    def remove_event(self, user_id, event_id):
        """
        Delete one of the user's events.

        Empty day queues and empty per-user maps are dropped afterwards.

        Returns:
            bool: True if the event was found and removed
        """
        event = self._events.get(event_id)
        if event is None:
            logger.warning("RemoveEvent: event not found, event_id=%s", event_id)
            return False
        days = self._daily_events.get(user_id)
        if days is None:
            logger.warning("RemoveEvent: no events for user_id=%s", user_id)
            return False
        queue = days.get(event.day)
        if queue is None:
            logger.warning("RemoveEvent: no events for date=%s", event.day)
            return False

        removed = queue.remove_if(lambda candidate: candidate.event_id == event_id)
        if queue.is_empty():
            days.remove(event.day)
            if days.is_empty():
                self._daily_events.remove(user_id)

        if removed:
            self._events.remove(event_id)
            logger.info("RemoveEvent: removed event_id=%s, title=%s", event_id, event.title)
        else:
            logger.warning("RemoveEvent: event_id=%s is not in user_id=%s's calendar", event_id, user_id)
        return removed

    def event_count(self):
        return self._events.size()

    # ------------------------------------------------------------------
    # Navigation history
    # ------------------------------------------------------------------

    def push_to_stack(self, item):
        self._history.push(item)

    def pop_from_stack(self):
        """Pop the most recent history entry, or None when history is empty."""
        if self._history.is_empty():
            return None
        return self._history.pop()

    def peek_stack(self):
        if self._history.is_empty():
            return None
        return self._history.peek()

    def is_stack_empty(self):
        return self._history.is_empty()

    def stack_size(self):
        return self._history.size()

    def clear_stack(self):
        self._history.clear()
