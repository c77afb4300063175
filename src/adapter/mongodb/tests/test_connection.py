"""Tests for the cached MongoDB client."""

import unittest
from unittest.mock import MagicMock, patch

from pymongo.errors import ConnectionFailure, PyMongoError

import adapter.mongodb.connection as connection
from adapter.mongodb.connection import get_mongodb_client, reset_client


class TestMongoClientCache(unittest.TestCase):
    """Test connection caching and reconnection."""

    def setUp(self):
        """Reset global state before each test."""
        reset_client()

    def tearDown(self):
        reset_client()

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_client_is_cached(self, mock_client_cls):
        """A healthy client is reused without reconnecting."""
        client = MagicMock()
        mock_client_cls.return_value = client

        self.assertIs(get_mongodb_client(), client)
        self.assertIs(get_mongodb_client(), client)
        self.assertEqual(mock_client_cls.call_count, 1)

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_reconnects_after_cached_client_failure(self, mock_client_cls):
        """A cached client that fails ping is replaced."""
        client1 = MagicMock()
        client2 = MagicMock()
        mock_client_cls.side_effect = [client1, client2]

        self.assertIs(get_mongodb_client(), client1)
        client1.admin.command.side_effect = PyMongoError("connection lost")

        self.assertIs(get_mongodb_client(), client2)
        self.assertEqual(mock_client_cls.call_count, 2)

    @patch('adapter.mongodb.connection.MONGO_URL', 'mongodb://localhost:27017')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_no_retry_after_initial_failure(self, mock_client_cls):
        """An initial connection failure is not retried until reset."""
        client = MagicMock()
        client.admin.command.side_effect = ConnectionFailure("refused")
        mock_client_cls.return_value = client

        self.assertIsNone(get_mongodb_client())
        self.assertIsNone(get_mongodb_client())
        self.assertEqual(mock_client_cls.call_count, 1)

        reset_client()
        client.admin.command.side_effect = None
        self.assertIs(get_mongodb_client(), client)

    @patch('adapter.mongodb.connection.MONGO_URL', None)
    @patch('adapter.mongodb.connection.MongoClient')
    def test_missing_url(self, mock_client_cls):
        """Without MONGO_URL no client is created."""
        self.assertIsNone(get_mongodb_client())
        mock_client_cls.assert_not_called()
        self.assertTrue(connection._connection_failed)


if __name__ == "__main__":
    unittest.main()
