"""Redis cache for list endpoints.

Only used when ``cache_enabled`` is set. Any Redis failure is logged and the
caller falls back to the database, so the cache can never break a request.
"""
import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from mototrack.config.settings import get_settings
from mototrack.core.logging import get_logger
from mototrack.core.metrics import track_cache_hit, track_cache_miss

logger = get_logger(__name__)

_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """Get the shared Redis client instance."""
    global _client
    if _client is None:
        _client = redis.from_url(get_settings().redis_url, decode_responses=True)
    return _client


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


class ListCache:
    """Cache for a single list payload under one key, evicted on any write."""

    def __init__(self, key: str, ttl: int | None = None, client: redis.Redis | None = None):
        settings = get_settings()
        self.key = key
        self.ttl = ttl or settings.cache_ttl_seconds
        self.enabled = settings.cache_enabled or client is not None
        self._client = client

    @property
    def client(self) -> redis.Redis:
        return self._client or get_redis()

    async def get(self) -> list[dict] | None:
        if not self.enabled:
            return None
        try:
            value = await self.client.get(self.key)
        except RedisError as e:
            logger.warning("cache_get_failed", key=self.key, error=str(e))
            return None
        if value is None:
            track_cache_miss(self.key)
            return None
        track_cache_hit(self.key)
        return json.loads(value)

    async def set(self, value: list[Any]) -> None:
        if not self.enabled:
            return
        try:
            await self.client.setex(self.key, self.ttl, json.dumps(value, default=str))
        except RedisError as e:
            logger.warning("cache_set_failed", key=self.key, error=str(e))

    async def evict(self) -> None:
        if not self.enabled:
            return
        try:
            await self.client.delete(self.key)
        except RedisError as e:
            logger.warning("cache_evict_failed", key=self.key, error=str(e))
