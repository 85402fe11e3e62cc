import logging
import logging.handlers
from pathlib import Path

from warehouse_inventory.config import config

class Logger:
    """Hands out named loggers configured from the LOGGING section.

    Each named logger gets its own rotating file under the log directory
    (when file output is on) and a console handler (when console output is on).
    """

    _instance = None
    _configured = {}

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._settings = config.log_config
        self._log_dir = Path(self._settings['directory'])
        if self._settings['file_output']:
            self._log_dir.mkdir(parents=True, exist_ok=True)

        self._initialized = True

    @property
    def level(self):
        return getattr(logging, self._settings['level'].upper(), logging.INFO)

    def _file_handler(self, name):
        return logging.handlers.RotatingFileHandler(
            self._log_dir / f"{name}.log",
            maxBytes=self._settings['max_size_mb'] * 1024 * 1024,
            backupCount=self._settings['backup_count']
        )

    def _handlers(self, name):
        handlers = []
        if self._settings['file_output']:
            handlers.append(self._file_handler(name))
        if self._settings['console_output']:
            handlers.append(logging.StreamHandler())

        formatter = logging.Formatter(self._settings['format'])
        for handler in handlers:
            handler.setFormatter(formatter)
        return handlers

    def get_logger(self, name):
        """Return the logger called `name`, configuring it on first use.

        Args:
            name: Dotted logger name, e.g. 'warehouse_inventory.db'

        Returns:
            logging.Logger that does not propagate to the root logger
        """
        configured = self._configured.get(name)
        if configured is not None:
            return configured

        named = logging.getLogger(name)
        named.setLevel(self.level)
        # Handlers left by an earlier configuration would duplicate every record
        for handler in list(named.handlers):
            named.removeHandler(handler)
        for handler in self._handlers(name):
            named.addHandler(handler)
        named.propagate = False

        self._configured[name] = named
        return named

# Global logger instance
logger = Logger()

def get_logger(name):
    """Get a logger with the specified name."""
    return logger.get_logger(name)
