"""
Tests for configuration, logging setup and the exception hierarchy.
"""
import logging
import logging.handlers
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from warehouse_inventory.config import DB_URL_ENV, config
from warehouse_inventory.exceptions import ConstraintViolationError, DatabaseError, InventoryError
from warehouse_inventory.logging_setup import get_logger, logger


class TestConfig(unittest.TestCase):

    def tearDown(self):
        """Tear down test fixtures."""
        config._config.remove_section('TEST')
        config.load()

    def test_defaults(self):
        self.assertEqual(config.get('LOGGING', 'level'), 'INFO')
        self.assertEqual(config.db_config['pool_size'], 10)
        self.assertIn('file_output', config.log_config)

    def test_missing_values_return_default(self):
        self.assertEqual(config.get('NOPE', 'key', 'fallback'), 'fallback')
        self.assertEqual(config.get_int('DATABASE', 'missing', 3), 3)
        self.assertIsNone(config.get_boolean('NOPE', 'flag'))

    def test_typed_getters(self):
        config.set('TEST', 'number', 42)
        config.set('TEST', 'ratio', '0.25')
        config.set('TEST', 'enabled', 'yes')
        config.set('TEST', 'broken', 'abc')

        self.assertEqual(config.get_int('TEST', 'number'), 42)
        self.assertEqual(config.get_float('TEST', 'ratio'), 0.25)
        self.assertTrue(config.get_boolean('TEST', 'enabled'))
        self.assertEqual(config.get_int('TEST', 'broken', 7), 7)

    def test_db_url_environment_override(self):
        with patch.dict(os.environ, {DB_URL_ENV: 'postgresql://inventory@db/inventory'}):
            self.assertEqual(config.get_db_url(), 'postgresql://inventory@db/inventory')

        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.get_db_url(), config.get('DATABASE', 'url'))

    def test_save_writes_ini(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_dir = Path(tmp_dir) / 'config'
            with patch.object(config, '_config_dir', config_dir), \
                    patch.object(config, '_config_path', config_dir / 'settings.ini'):
                config.set('TEST', 'saved', 'value')
                config.save()

                content = (config_dir / 'settings.ini').read_text()

        self.assertIn('[TEST]', content)
        self.assertIn('saved = value', content)


class TestLogging(unittest.TestCase):

    def test_get_logger_is_cached(self):
        first = get_logger('warehouse_inventory.tests')
        self.assertIs(first, get_logger('warehouse_inventory.tests'))
        self.assertFalse(first.propagate)

    def test_handlers_follow_settings(self):
        with tempfile.TemporaryDirectory() as tmp_dir, \
                patch.dict(logger._settings, {'file_output': True, 'console_output': False}), \
                patch.object(logger, '_log_dir', Path(tmp_dir)):
            named = get_logger('warehouse_inventory.tests.file_only')
            handlers = list(named.handlers)
            for handler in handlers:
                handler.close()

        self.assertEqual([type(h) for h in handlers], [logging.handlers.RotatingFileHandler])
        self.assertTrue(handlers[0].baseFilename.endswith('warehouse_inventory.tests.file_only.log'))


class TestExceptions(unittest.TestCase):

    def test_str_with_code(self):
        error = InventoryError("Something broke", code='E42')
        self.assertEqual(str(error), '[E42] Something broke')
        self.assertEqual(str(InventoryError("plain")), 'plain')

    def test_constraint_violation_defaults(self):
        error = ConstraintViolationError(details={'entity': 'Product'})
        self.assertIsInstance(error, DatabaseError)
        self.assertEqual(error.to_dict(), {
            'error': 'ConstraintViolationError',
            'message': 'Constraint violation',
            'code': 'CONSTRAINT_VIOLATION',
            'details': {'entity': 'Product'}
        })


if __name__ == '__main__':
    unittest.main()
