from .app import Application, create_app
from .config import get_config

__all__ = ['Application', 'create_app', 'get_config']
