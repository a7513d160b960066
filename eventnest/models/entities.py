"""
Domain Entities for EventNest

User  — account that owns events and friendships
Event — a scheduled block of time on one calendar day
PriorityLevel / compare_event_priority — the ordering used by each day's
PriorityQueue

Author: EventNest Team
"""

import enum

from werkzeug.security import check_password_hash, generate_password_hash


class PriorityLevel(enum.Enum):
    """Event priority. The value doubles as the ordinal (LOW=0, MEDIUM=1, HIGH=2)."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @classmethod
    def parse(cls, value):
        """Accept a PriorityLevel, its name (any case) or its ordinal."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        return cls[str(value).strip().upper()]


class User:
    """
    Application user.

    Passwords are never stored in plain text; only a werkzeug hash is kept.
    Two users are equal when their user_id matches.
    """

    def __init__(self, user_id, username, password_hash=None):
        self.user_id = user_id
        self.username = username
        self.password_hash = password_hash

    @classmethod
    def create(cls, user_id, username, password):
        user = cls(user_id, username)
        user.set_password(password)
        return user

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash or password is None:
            return False
        return check_password_hash(self.password_hash, password)

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self):
        return hash(self.user_id)

    def __str__(self):
        return f'User: {self.username} (ID: {self.user_id})'

    def __repr__(self):
        return f'User({self.user_id!r}, {self.username!r})'


class Event:
    """
    A calendar event.

    Attributes:
        event_id (str): Unique id
        title (str): Display name
        start_time (datetime): Naive local start
        end_time (datetime): Naive local end
        participants (list): Participant usernames
        priority (PriorityLevel): Scheduling priority
    """

    def __init__(self, event_id, title, start_time, end_time, participants=None,
                 priority=PriorityLevel.MEDIUM):
        self.event_id = event_id
        self.title = title
        self.start_time = start_time
        self.end_time = end_time
        self.participants = list(participants) if participants else []
        self.priority = PriorityLevel.parse(priority)

    @property
    def day(self):
        """Calendar date the event is filed under."""
        return self.start_time.date()

    def overlaps(self, start, end):
        """True if [start, end] touches this event's span (bounds inclusive)."""
        return start <= self.end_time and end >= self.start_time

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.event_id == other.event_id

    def __hash__(self):
        return hash(self.event_id)

    def __str__(self):
        return f'{self.title} ({self.start_time.isoformat()} ~ {self.end_time.isoformat()})'

    def __repr__(self):
        return f'Event({self.event_id!r}, {self.title!r}, priority={self.priority.name})'


def compare_event_priority(first, second):
    """
    Comparator for a day's event queue.

    Higher PriorityLevel comes first; on equal priority the earlier
    start_time comes first.
    """
    priority_compare = second.priority.value - first.priority.value
    if priority_compare != 0:
        return priority_compare
    if first.start_time < second.start_time:
        return -1
    if first.start_time > second.start_time:
        return 1
    return 0
