from __future__ import annotations

from fnmatch import fnmatchcase

import pytest

from staff_gateway.staff_store import StaffStore


class FakePipeline:
    """Queues commands and runs them against FakeRedis on execute()"""
    def __init__(self, redis: FakeRedis):
        self._redis = redis
        self._commands = []

    def __getattr__(self, name):
        def queue(*args, **kwargs):
            self._commands.append((name, args, kwargs))
            return self
        return queue

    async def execute(self):
        self._redis.pipelines_executed += 1
        results = [await getattr(self._redis, name)(*args, **kwargs) for name, args, kwargs in self._commands]
        self._commands = []
        return results


class FakeRedis:
    """Just enough of redis.asyncio.Redis (decode_responses=True) for StaffStore"""
    def __init__(self):
        self.data: dict = {}
        self.pipelines_executed = 0

    def pipeline(self):
        return FakePipeline(self)

    async def incr(self, key):
        self.data[key] = int(self.data.get(key, 0)) + 1
        return self.data[key]

    async def get(self, key):
        value = self.data.get(key)
        return None if value is None else str(value)

    async def set(self, key, value):
        self.data[key] = value
        return True

    async def hset(self, key, mapping):
        h = self.data.setdefault(key, {})
        added = len(set(mapping) - set(h))
        h.update({k: str(v) for k, v in mapping.items()})
        return added

    async def hget(self, key, field):
        return self.data.get(key, {}).get(field)

    async def hgetall(self, key):
        return dict(self.data.get(key, {}))

    async def sadd(self, key, *members):
        s = self.data.setdefault(key, set())
        added = len({str(m) for m in members} - s)
        s.update(str(m) for m in members)
        return added

    async def srem(self, key, *members):
        s = self.data.get(key, set())
        removed = len({str(m) for m in members} & s)
        s.difference_update(str(m) for m in members)
        return removed

    async def smembers(self, key):
        return set(self.data.get(key, set()))

    async def scan_iter(self, match="*"):
        for key in list(self.data):
            if fnmatchcase(key, match):
                yield key


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def store(fake_redis):
    return StaffStore(fake_redis)
