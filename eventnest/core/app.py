"""
Application Factory for EventNest

Demonstrates OOP Concept: APPLICATION FACTORY PATTERN

Author: EventNest Team
Purpose: Build a configured, ready-to-use set of managers over one DataStore
"""

import logging

from eventnest.core.config import get_config
from eventnest.services.data_store import DataStore
from eventnest.services.managers import EventManager, FriendManager, NavigationManager, UserManager

logger = logging.getLogger(__name__)


class Application:
    """
    One running EventNest session.

    Attributes:
        config: Configuration class in use
        store (DataStore): All in-memory state
        navigation (NavigationManager)
        users (UserManager)
        events (EventManager)
        friends (FriendManager)
    """

    def __init__(self, config, store, navigation, users, events, friends):
        self.config = config
        self.store = store
        self.navigation = navigation
        self.users = users
        self.events = events
        self.friends = friends

    @property
    def current_user(self):
        return self.users.current_user


def configure_logging(config_class):
    logging.basicConfig(level=config_class.LOG_LEVEL, format=config_class.LOG_FORMAT)


def create_app(config_name=None):
    """
    Application Factory Function

    Args:
        config_name (str): Configuration name ('development', 'production', 'testing')

    Returns:
        Application: Configured application instance
    """
    config_class = get_config(config_name)
    configure_logging(config_class)

    store = DataStore(config_class.HASHMAP_INITIAL_CAPACITY, config_class.HASHMAP_LOAD_FACTOR)
    if config_class.SEED_DEMO_DATA:
        store.seed_demo_data()

    navigation = NavigationManager(store, start_view='login')
    app = Application(
        config=config_class,
        store=store,
        navigation=navigation,
        users=UserManager(store, navigation),
        events=EventManager(store, config_class.TIMEZONE, config_class.MAX_TITLE_LENGTH),
        friends=FriendManager(store),
    )
    logger.debug("Application created with %s", config_class.__name__)
    return app
