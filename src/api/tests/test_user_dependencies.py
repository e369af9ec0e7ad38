"""Unit tests for API dependencies — user repository and service wiring."""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from api.dependencies import get_user_repo, get_user_service
from adapter.fake.user_repository import FakeUserRepository
from adapter.mongodb.connection import DATABASE_NAME
from adapter.mongodb.user_repository import MongoUserRepository
from services.user_service import DefaultUserService


class TestGetUserRepo(unittest.TestCase):

    @patch('api.dependencies.get_mongodb_client')
    def test_returns_mongo_repository_when_connected(self, mock_get_client):
        mock_client = MagicMock()
        mock_get_client.return_value = mock_client

        repo = get_user_repo()

        self.assertIsInstance(repo, MongoUserRepository)
        mock_client.__getitem__.assert_called_once_with(DATABASE_NAME)

    @patch('api.dependencies.get_mongodb_client')
    def test_raises_503_when_mongodb_unavailable(self, mock_get_client):
        mock_get_client.return_value = None

        with self.assertRaises(HTTPException) as context:
            get_user_repo()

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")


class TestGetUserService(unittest.TestCase):

    def test_service_uses_given_repository(self):
        repo = FakeUserRepository()

        service = get_user_service(repo)

        self.assertIsInstance(service, DefaultUserService)
        self.assertIs(service.repo, repo)


if __name__ == '__main__':
    unittest.main()
