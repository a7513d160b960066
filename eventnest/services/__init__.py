from .data_store import DataStore
from .managers import EventManager, FriendManager, NavigationManager, UserManager

__all__ = ['DataStore', 'EventManager', 'FriendManager', 'NavigationManager', 'UserManager']
