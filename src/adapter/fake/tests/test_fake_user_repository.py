"""Unit tests for FakeUserRepository — verifies Port contract compliance."""

import unittest
from dataclasses import replace

from adapter.fake.user_repository import FakeUserRepository
from domain.model.user import User


def _user(login_name='asmith', email_address='a@x.edu', **overrides) -> User:
    defaults = dict(
        login_name=login_name,
        email_address=email_address,
        first_name='Ann',
        last_name='Smith',
    )
    defaults.update(overrides)
    return User(**defaults)


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = FakeUserRepository()

    # ── save ──────────────────────────────────────────────────

    def test_save_assigns_increasing_ids(self):
        first = self.repo.save(_user())
        second = self.repo.save(_user('bjones', 'b@x.edu'))

        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)

    def test_save_with_id_replaces_existing(self):
        saved = self.repo.save(_user())
        self.repo.save(replace(saved, first_name='Anna'))

        self.assertEqual(len(self.repo.find_all()), 1)
        self.assertEqual(self.repo.find_by_id(saved.id).first_name, 'Anna')

    def test_ids_are_not_reused_after_delete(self):
        first = self.repo.save(_user())
        self.repo.delete(first.id)
        second = self.repo.save(_user('bjones', 'b@x.edu'))

        self.assertNotEqual(first.id, second.id)

    # ── reads ─────────────────────────────────────────────────

    def test_find_all_empty(self):
        self.assertEqual(self.repo.find_all(), [])

    def test_find_all_ordered_by_id(self):
        self.repo.save(_user())
        self.repo.save(_user('bjones', 'b@x.edu'))

        self.assertEqual([u.id for u in self.repo.find_all()], [1, 2])

    def test_find_by_login_name(self):
        saved = self.repo.save(_user())

        self.assertEqual(self.repo.find_by_login_name('asmith'), saved)
        self.assertIsNone(self.repo.find_by_login_name('nobody'))

    def test_find_by_email_address(self):
        saved = self.repo.save(_user())

        self.assertEqual(self.repo.find_by_email_address('a@x.edu'), saved)
        self.assertIsNone(self.repo.find_by_email_address('nobody@x.edu'))

    def test_find_by_id_returns_none_for_missing(self):
        self.assertIsNone(self.repo.find_by_id(42))

    # ── delete ────────────────────────────────────────────────

    def test_delete_returns_false_for_missing(self):
        self.assertFalse(self.repo.delete(42))

    def test_delete_all(self):
        self.repo.save(_user())
        self.repo.save(_user('bjones', 'b@x.edu'))
        self.repo.delete_all()

        self.assertEqual(self.repo.find_all(), [])


if __name__ == '__main__':
    unittest.main()
