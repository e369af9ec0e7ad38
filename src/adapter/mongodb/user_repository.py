"""MongoDB implementation of UserRepository."""

from dataclasses import replace
from logging import getLogger
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb.connection import COUNTERS_COLLECTION_NAME, USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError
from domain.model.user import User

logger = getLogger(__name__)

USER_ID_SEQUENCE = 'user_id'


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]
        self.counters = db[COUNTERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('login_name', 1)], 'idx_users_login_name', unique=True)
            create_index_safe(self.collection, [('email_address', 1)], 'idx_users_email_address', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            created_at=doc.get('created_at'),
            updated_at=doc.get('updated_at'),
            login_name=doc['login_name'],
            email_address=doc['email_address'],
            first_name=doc['first_name'],
            last_name=doc['last_name'],
        )

    def _to_document(self, user: User) -> dict:
        return {
            '_id': user.id,
            'created_at': user.created_at,
            'updated_at': user.updated_at,
            'login_name': user.login_name,
            'email_address': user.email_address,
            'first_name': user.first_name,
            'last_name': user.last_name,
        }

    def _next_id(self) -> int:
        """Allocate the next user ID from the counters collection (atomic $inc)."""
        counter = self.counters.find_one_and_update(
            {'_id': USER_ID_SEQUENCE},
            {'$inc': {'seq': 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter['seq']

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User | None:
        """Insert a new user (assigning an ID) or replace an existing one."""
        try:
            if user.id is None:
                user = replace(user, id=self._next_id())
                self.collection.insert_one(self._to_document(user))
                logger.info("User created", extra={"userId": user.id, "loginName": user.login_name})
            else:
                result = self.collection.replace_one({'_id': user.id}, self._to_document(user))
                if result.matched_count == 0:
                    logger.warning("User update matched no document", extra={"userId": user.id})
                    return None
                logger.info("User updated", extra={"userId": user.id})
            return user
        except DuplicateKeyError as e:
            logger.warning("User save failed: login name or email already exists", extra={
                "loginName": user.login_name,
                "emailAddress": user.email_address,
            })
            raise DuplicateError("Login name or email address is already in use") from e
        except PyMongoError as e:
            logger.error("Failed to save user", extra={"userId": user.id, "error": str(e)})
            return None

    def delete(self, user_id: int) -> bool:
        try:
            result = self.collection.delete_one({'_id': user_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error("Failed to delete user", extra={"userId": user_id, "error": str(e)})
            return False

    def delete_all(self) -> None:
        try:
            self.collection.delete_many({})
        except PyMongoError as e:
            logger.error("Failed to delete users", extra={"error": str(e)})

    # ── read operations ──────────────────────────────────────

    def find_all(self) -> list[User]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find().sort('_id', 1)]
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            return []

    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        return self._find_one({'_id': user_id})

    def find_by_login_name(self, login_name: str) -> User | None:
        return self._find_one({'login_name': login_name})

    def find_by_email_address(self, email_address: str) -> User | None:
        return self._find_one({'email_address': email_address})

    def _find_one(self, query: dict) -> User | None:
        try:
            doc = self.collection.find_one(query)
            if doc:
                return self._to_domain(doc)
            return None
        except PyMongoError as e:
            logger.error("Failed to get user", extra={"query": str(query), "error": str(e)})
            return None
