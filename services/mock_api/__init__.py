from .app import create_app
from .config import ServerConfig, get_config, load_config

__all__ = ['create_app', 'ServerConfig', 'get_config', 'load_config']
