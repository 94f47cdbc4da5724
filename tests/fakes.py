"""In-memory stand-ins for MongoDB collections and service collaborators."""
from types import SimpleNamespace
from typing import Any


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]):
        self.docs = docs

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self.docs = sorted(self.docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, n: int) -> "FakeCursor":
        self.docs = self.docs[:n]
        return self

    def __aiter__(self):
        self._iter = iter(self.docs)
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return dict(next(self._iter))
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    def __init__(self):
        self.docs: list[dict[str, Any]] = []

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for doc in self.docs:
            if _matches(doc, query):
                return {"_id": id(doc), **doc}
        return None

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([doc for doc in self.docs if _matches(doc, query)])

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self.docs.append(dict(doc))
        return SimpleNamespace(acknowledged=True)

    async def update_one(self, query: dict[str, Any], update: dict[str, Any], upsert: bool = False):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(acknowledged=True)
        if upsert:
            self.docs.append({**query, **update["$set"]})
        return SimpleNamespace(acknowledged=True)


class FakeDatabase(dict):
    def __missing__(self, name: str) -> FakeCollection:
        collection = self[name] = FakeCollection()
        return collection
