"""
Business Logic Managers for EventNest

This module demonstrates:
1. OOP Concepts: Classes, Encapsulation, Abstraction
2. Data Structures: HashMap, PriorityQueue, AdjacencyList, ArrayStack
   (reached through the DataStore)
3. Algorithms: Conflict detection, friend-of-friend recommendation

These manager classes hold the login, event, friend and navigation rules
so that any front end stays a thin caller.

Operations that can fail because of user input return a
(result, error message) tuple instead of raising.

Author: EventNest Team
"""

import logging
import uuid
from datetime import datetime

import pytz

from eventnest.models.entities import Event, PriorityLevel, User

logger = logging.getLogger(__name__)


class NavigationManager:
    """
    Navigation Manager Class - Back-stack of visited views

    Data Structure: STACK (ArrayStack held by the DataStore)
    - push_view saves the current view before switching
    - pop_view returns to the most recently saved view
    """

    def __init__(self, data_store, start_view=None):
        self._store = data_store
        self.current_view = start_view

    def push_view(self, view_name):
        """Switch to view_name, remembering the current view."""
        if self.current_view is not None:
            self._store.push_to_stack(self.current_view)
        self.current_view = view_name

    def pop_view(self):
        """
        Go back one view.

        Returns:
            The view that is now current, or None when there is no history
        """
        previous = self._store.pop_from_stack()
        if previous is None:
            logger.info("No more views in history")
            return None
        self.current_view = previous
        return previous

    @property
    def history_depth(self):
        return self._store.stack_size()


class UserManager:
    """
    User Manager Class - Handles registration and login

    OOP Concepts:
    - ENCAPSULATION: Authentication logic and the logged-in user
    - ABSTRACTION: Simple interface for user management
    """

    def __init__(self, data_store, navigation=None):
        self._store = data_store
        self._navigation = navigation
        self.current_user = None

    def _next_user_id(self):
        number = self._store.user_count() + 1
        while self._store.get_user(f'u{number:03d}') is not None:
            number += 1
        return f'u{number:03d}'

    def register(self, username, password):
        """
        Create a new account.

        Args:
            username (str): Desired username
            password (str): Plain text password

        Returns:
            tuple: (User object or None, error message or None)
        """
        username = (username or '').strip()
        password = (password or '').strip()
        if not username or not password:
            return None, "Username/Password cannot be empty"
        if self._store.find_user_by_username(username) is not None:
            return None, "Username already taken, please choose another"

        user = User.create(self._next_user_id(), username, password)
        self._store.add_user(user)
        logger.info("Registered user %s (%s)", user.username, user.user_id)
        return user, None

    def login(self, username, password):
        """
        Authenticate and remember the user as current_user.

        Returns:
            tuple: (User object or None, error message or None)
        """
        username = (username or '').strip()
        password = (password or '').strip()
        if not username or not password:
            return None, "Username/Password cannot be empty"

        user = self._store.find_user_by_username(username)
        if user is None or not user.check_password(password):
            logger.info("Failed login for %s", username)
            return None, "Login failed! Invalid credentials."

        self.current_user = user
        if self._navigation is not None:
            self._navigation.push_view('calendar')
        logger.info("User %s logged in", username)
        return user, None

    def logout(self):
        self.current_user = None
        if self._navigation is not None:
            self._navigation.pop_view()

    def get_all_users(self):
        return self._store.all_users()

    def get_user_by_id(self, user_id):
        return self._store.get_user(user_id)


class EventManager:
    """
    Event Manager Class - Creates, lists and cancels events

    Data Structure: PRIORITY QUEUE per (user, day)
    - Events come back highest priority first, earlier start on ties

    Times: aware datetimes are converted into the configured zone (pytz)
    and stored naive, so each event lands on the local calendar day.
    """

    def __init__(self, data_store, timezone='UTC', max_title_length=50):
        self._store = data_store
        self._timezone = pytz.timezone(timezone)
        self._max_title_length = max_title_length

    def to_local(self, moment):
        """Return moment as a naive datetime in the configured zone."""
        if moment.tzinfo is None:
            return moment
        return moment.astimezone(self._timezone).replace(tzinfo=None)

    def localize(self, moment):
        """Attach the configured zone to a naive local datetime."""
        return self._timezone.localize(moment)

    def validate_title(self, title):
        """Return an error message for a bad title, or None."""
        if title is None or not title.strip():
            return "Event title cannot be empty."
        if len(title) > self._max_title_length:
            return f"Event title cannot exceed {self._max_title_length} characters."
        return None

    def check_time_conflict(self, user_id, start, end):
        """True if [start, end] overlaps any event already on that day."""
        start = self.to_local(start)
        end = self.to_local(end)
        for event in self._store.get_user_events_by_day(user_id, start.date()):
            if event.overlaps(start, end):
                return True
        return False

    def create_event(self, user, title, start, end, participants=None,
                     priority=PriorityLevel.MEDIUM, allow_conflict=False):
        """
        Validate and schedule a new event for user.

        Args:
            user (User): Owner
            title (str): Event title
            start (datetime): Start, naive local or timezone-aware
            end (datetime): End, same day as start
            participants (list | str): Usernames, or a comma-separated string
            priority (PriorityLevel | str | int): Event priority
            allow_conflict (bool): Schedule even if it overlaps another event

        Returns:
            tuple: (Event object or None, error message or None)
        """
        error = self.validate_title(title)
        if error:
            return None, error

        start = self.to_local(start)
        end = self.to_local(end)
        if end <= start:
            return None, "The end time must be later than the start time."
        if start.date() != end.date():
            return None, "An event must start and end on the same day."

        try:
            priority = PriorityLevel.parse(priority)
        except (KeyError, ValueError):
            return None, f"Unknown priority: {priority}"

        if not allow_conflict and self.check_time_conflict(user.user_id, start, end):
            return None, "This event overlaps with existing events."

        if isinstance(participants, str):
            participants = participants.split(',')
        names = [name.strip() for name in participants or [] if name and name.strip()]
        if user.username not in names:
            names.append(user.username)

        event = Event(str(uuid.uuid4()), title.strip(), start, end, names, priority)
        self._store.add_event(user.user_id, event)
        return event, None

    def cancel_event(self, user, event_id):
        return self._store.remove_event(user.user_id, event_id)

    def events_for_day(self, user, day):
        if isinstance(day, datetime):
            day = self.to_local(day).date()
        return self._store.get_user_events_by_day(user.user_id, day)

    def get_event(self, event_id):
        return self._store.get_event_by_id(event_id)

    def search_events(self, title):
        return self._store.search_events_by_title(title)


class FriendManager:
    """
    Friend Manager Class - Friendships and recommendations

    Data Structure: GRAPH (AdjacencyList of user ids)
    - A friendship is stored as two directed edges
    - Recommendations are friends-of-friends
    """

    def __init__(self, data_store):
        self._store = data_store

    def add_friend(self, user, username):
        """
        Befriend the user named username.

        Returns:
            tuple: (True or False, error message or None)
        """
        username = (username or '').strip()
        if not username:
            return False, "Please enter a username"

        friend = self._store.find_user_by_username(username)
        if friend is None:
            return False, f"No user found with username: {username}"
        if friend.user_id == user.user_id:
            return False, "You cannot add yourself as a friend"
        if self._store.are_friends(user.user_id, friend.user_id):
            return False, f"{username} is already your friend"

        self._store.add_friend_relation(user.user_id, friend.user_id)
        logger.info("%s and %s are now friends", user.username, friend.username)
        return True, None

    def remove_friend(self, user, friend_id):
        return self._store.remove_friend_relation(user.user_id, friend_id)

    def _resolve(self, user_ids):
        users = []
        for user_id in user_ids:
            found = self._store.get_user(user_id)
            if found is not None:
                users.append(found)
        return users

    def get_friends(self, user_id):
        return self._resolve(self._store.get_friend_ids(user_id))

    def recommend_friends(self, user_id):
        return self._resolve(self._store.recommend_friends(user_id))
