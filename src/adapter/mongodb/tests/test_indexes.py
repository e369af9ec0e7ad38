"""Unit tests for MongoDB index conflict resolution."""

import unittest
from unittest.mock import MagicMock

from pymongo.errors import OperationFailure

from adapter.mongodb.indexes import create_index_safe


class TestCreateIndexSafe(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()

    def test_creates_index(self):
        self.assertTrue(create_index_safe(self.collection, [('login_name', 1)], 'idx_users_login_name', unique=True))

        self.collection.create_index.assert_called_once_with(
            [('login_name', 1)], name='idx_users_login_name', unique=True,
        )

    def test_drops_index_with_same_keys_under_other_name(self):
        self.collection.create_index.side_effect = [OperationFailure('Index already exists with a different name'), None]
        self.collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'login_name_1': {'key': [('login_name', 1)]},
        }

        self.assertTrue(create_index_safe(self.collection, [('login_name', 1)], 'idx_users_login_name'))

        self.collection.drop_index.assert_called_once_with('login_name_1')
        self.assertEqual(self.collection.create_index.call_count, 2)

    def test_unrelated_error_propagates(self):
        self.collection.create_index.side_effect = OperationFailure('not authorized')

        with self.assertRaises(OperationFailure):
            create_index_safe(self.collection, [('login_name', 1)], 'idx_users_login_name')

    def test_unresolvable_conflict_returns_false(self):
        self.collection.create_index.side_effect = OperationFailure('Index already exists')
        self.collection.index_information.return_value = {'_id_': {'key': [('_id', 1)]}}

        self.assertFalse(create_index_safe(self.collection, [('login_name', 1)], 'idx_users_login_name'))


if __name__ == '__main__':
    unittest.main()
