import os
import configparser
from pathlib import Path

CONFIG_DIR_ENV = 'WAREHOUSE_INVENTORY_CONFIG_DIR'
DB_URL_ENV = 'WAREHOUSE_INVENTORY_DB_URL'

DEFAULT_SETTINGS = {
    'DATABASE': {
        'url': 'sqlite:///warehouse_inventory.db',
        'echo': 'False',
        'pool_size': '10',
        'max_overflow': '20',
        'pool_timeout': '30',
        'pool_recycle': '1800'
    },
    'LOGGING': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'directory': 'logs',
        'max_size_mb': '10',
        'backup_count': '5',
        'console_output': 'True',
        'file_output': 'True'
    }
}

class Config:
    """Configuration manager for the Warehouse Inventory System."""

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

        self._config_dir = Path(os.environ.get(CONFIG_DIR_ENV, 'config'))
        self._config_path = self._config_dir / 'settings.ini'
        self._config = configparser.ConfigParser(interpolation=None)
        self.load()

        self._initialized = True

    def load(self):
        """Load defaults, then overlay settings.ini if it exists."""
        self._config.read_dict(DEFAULT_SETTINGS)
        if self._config_path.exists():
            self._config.read(self._config_path)

    def save(self):
        """Save configuration to file."""
        if not self._config_dir.exists():
            self._config_dir.mkdir(parents=True)

        with open(self._config_path, 'w') as configfile:
            self._config.write(configfile)

    @property
    def config_path(self):
        return self._config_path

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

    def set(self, section, key, value):
        """Set configuration value in memory. Call save() to persist it."""
        if not self._config.has_section(section):
            self._config.add_section(section)

        self._config.set(section, key, str(value))

    def get_db_url(self):
        """Get the SQLAlchemy database URL.

        The WAREHOUSE_INVENTORY_DB_URL environment variable wins over
        the DATABASE.url setting.
        """
        return os.environ.get(DB_URL_ENV) or self.get('DATABASE', 'url', DEFAULT_SETTINGS['DATABASE']['url'])

    @property
    def db_config(self):
        """Get database engine configuration."""
        return {
            'url': self.get_db_url(),
            'echo': self.get_boolean('DATABASE', 'echo', False),
            'pool_size': self.get_int('DATABASE', 'pool_size', 10),
            'max_overflow': self.get_int('DATABASE', 'max_overflow', 20),
            'pool_timeout': self.get_int('DATABASE', 'pool_timeout', 30),
            'pool_recycle': self.get_int('DATABASE', 'pool_recycle', 1800)
        }

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
            'file_output': self.get_boolean('LOGGING', 'file_output', True)
        }

# Global config instance
config = Config()
