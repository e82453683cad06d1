"""A small key-value store over Redis."""

import logging

import redis

_logger = logging.getLogger("servicekit")


class RedisStore:
    """String key-value access to Redis database 0, no password."""

    def __init__(self, host="localhost", port=6379, client=None):
        self.address = f"{host}:{port}"
        _logger.info("connect to redis: %s", self.address)
        self.client = client or redis.Redis(host=host, port=port, db=0, decode_responses=True)

    def set(self, key, value):
        """Store a value without expiry."""
        self.client.set(key, value)

    def get(self, key):
        """Return the stored value, or "" when absent or on error."""
        try:
            value = self.client.get(key)
        except redis.RedisError:
            return ""
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return "" if value is None else str(value)

    def delete(self, key):
        """Remove a key."""
        self.client.delete(key)