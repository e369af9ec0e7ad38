import os
import logging
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'campuscoffee')
USERS_COLLECTION_NAME = 'users'
COUNTERS_COLLECTION_NAME = 'counters'

_client_cache = None
_connection_attempted = False
_connection_failed = False


def reset_client():
    global _client_cache, _connection_attempted, _connection_failed
    _client_cache = None
    _connection_attempted = False
    _connection_failed = False


def get_mongodb_client() -> MongoClient | None:
    """Get MongoDB client with connection caching and reconnection logic.

    A cached client is returned while it answers ping; otherwise a new
    connection is attempted. If the first attempt failed (missing or wrong
    configuration), later calls return None without retrying.

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache, _connection_attempted, _connection_failed

    if _client_cache:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

    if _connection_failed:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured.")
        _connection_failed = True
        return None

    try:
        client = MongoClient(
            MONGO_URL,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            retryWrites=True,
            retryReads=True,
            tz_aware=True,  # timestamps come back as aware UTC datetimes
        )
        client.admin.command('ping')

        is_first_connection = not _connection_attempted
        _connection_attempted = True
        _client_cache = client

        if is_first_connection:
            logger.info(f"[MONGODB] Connected successfully to {DATABASE_NAME}")

        return client
    except (ConnectionFailure, PyMongoError) as e:
        if not _connection_attempted:
            logger.error(f"[MONGODB] Initial connection failed: {str(e)[:200]}")
            _connection_failed = True
        return None
