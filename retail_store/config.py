import os
import configparser
from pathlib import Path

from sqlalchemy.engine import URL

from retail_store.exceptions import ConfigError

DEFAULT_SETTINGS = {
    'DATABASE': {
        'engine': 'postgresql',
        'host': 'localhost',
        'password': '',
        'echo': 'False'
    },
    'LOGGING': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'directory': 'logs',
        'max_size_mb': '10',
        'backup_count': '5',
        'console_output': 'True',
        'console_level': 'WARNING'
    },
    'BUSINESS_RULES': {
        'nearby_radius': '30',
        'recent_limit': '5',
        'top_limit': '5',
        'manager_access_code': 'manager',
        'admin_access_code': 'admin'
    }
}


class Config:
    """Configuration manager for the Retail Store client."""

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the configuration if not already initialized."""
        if self._initialized:
            return

        self._config = configparser.ConfigParser(interpolation=None)
        self.load()
        self._initialized = True

    @staticmethod
    def settings_path():
        """Location of settings.ini, overridable with RETAIL_STORE_SETTINGS."""
        env_path = os.environ.get('RETAIL_STORE_SETTINGS')
        if env_path:
            return Path(env_path).expanduser()
        return Path('config') / 'settings.ini'

    def load(self, path=None):
        """(Re)load the configuration.

        Defaults are always applied first so that a partial settings file
        only needs to name the values it overrides.

        Args:
            path: Optional explicit settings file
        """
        self._config = configparser.ConfigParser(interpolation=None)
        self._config.read_dict(DEFAULT_SETTINGS)

        self._config_path = Path(path) if path else self.settings_path()
        if self._config_path.exists():
            self._config.read(self._config_path)

    def get(self, section, key, default=None):
        """Get configuration value."""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return default

    def get_int(self, section, key, default=None):
        """Get configuration value as integer."""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_float(self, section, key, default=None):
        """Get configuration value as float."""
        try:
            return self._config.getfloat(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_boolean(self, section, key, default=None):
        """Get configuration value as boolean."""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_db_url(self, dbname, port, user, password=None, host=None):
        """Generate SQLAlchemy database URL.

        Args:
            dbname: Database name
            port: Port the server listens on
            user: Database user
            password: Password, defaults to the configured one
            host: Host, defaults to the configured one
        """
        engine = self.get('DATABASE', 'engine', 'postgresql')
        if password is None:
            password = self.get('DATABASE', 'password', '')
        if host is None:
            host = self.get('DATABASE', 'host', 'localhost')

        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid database port: {port}")

        return URL.create(
            drivername=engine,
            username=user,
            password=password or None,
            host=host,
            port=port,
            database=dbname
        )

    @property
    def log_config(self):
        """Get logging configuration."""
        return {
            'level': self.get('LOGGING', 'level', 'INFO'),
            'format': self.get('LOGGING', 'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            'directory': self.get('LOGGING', 'directory', 'logs'),
            'max_size_mb': self.get_int('LOGGING', 'max_size_mb', 10),
            'backup_count': self.get_int('LOGGING', 'backup_count', 5),
            'console_output': self.get_boolean('LOGGING', 'console_output', True),
            'console_level': self.get('LOGGING', 'console_level', 'WARNING')
        }

    @property
    def business_rules(self):
        """Get business rules configuration."""
        return {
            'nearby_radius': self.get_float('BUSINESS_RULES', 'nearby_radius', 30.0),
            'recent_limit': self.get_int('BUSINESS_RULES', 'recent_limit', 5),
            'top_limit': self.get_int('BUSINESS_RULES', 'top_limit', 5),
            'manager_access_code': self.get('BUSINESS_RULES', 'manager_access_code', 'manager'),
            'admin_access_code': self.get('BUSINESS_RULES', 'admin_access_code', 'admin')
        }

# Global config instance
config = Config()
