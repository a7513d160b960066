"""
EventNest Application Runner
Run this file from the root directory to walk through a demo session.
"""
from datetime import datetime, timedelta

from eventnest.core import create_app
from eventnest.models import PriorityLevel

if __name__ == '__main__':
    print("=" * 60)
    print("EventNest Demo Session")
    print("=" * 60)

    app = create_app('development')

    user, error = app.users.login('alice', '123456')
    if error:
        raise SystemExit(error)
    print("Logged in as:", user)
    print("Current view:", app.navigation.current_view)

    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    app.events.create_event(user, 'Standup', today + timedelta(hours=9), today + timedelta(hours=9, minutes=15),
                            'bob', PriorityLevel.MEDIUM)
    app.events.create_event(user, 'Design review', today + timedelta(hours=14), today + timedelta(hours=15),
                            ['bob', 'cathy'], PriorityLevel.HIGH)
    app.events.create_event(user, 'Gym', today + timedelta(hours=18), today + timedelta(hours=19),
                            None, PriorityLevel.LOW)

    print("-" * 60)
    print("Today's events (highest priority first):")
    for event in app.events.events_for_day(user, today.date()):
        print(f"  [{event.priority.name:<6}] {event}")

    print("-" * 60)
    print("Friends:", ', '.join(f.username for f in app.friends.get_friends(user.user_id)))
    print("Recommended:", ', '.join(f.username for f in app.friends.recommend_friends(user.user_id)))

    app.users.logout()
    print("After logout, current view:", app.navigation.current_view)
    print("=" * 60)
