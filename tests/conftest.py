from types import SimpleNamespace

import pytest

from bulk_seeder import es_client


class FakeAsyncElasticsearch:
    """In-memory stand-in for AsyncElasticsearch that records bulk calls."""

    instances = []

    def __init__(self, hosts=None, **kwargs):
        self.hosts = hosts
        self.kwargs = kwargs
        self.calls = []
        self.closed = False
        self.error = None
        self.status = 200
        self.response_body = None
        FakeAsyncElasticsearch.instances.append(self)

    async def bulk(self, operations=None, index=None, **kwargs):
        self.calls.append({"operations": list(operations), "index": index})
        if self.error is not None:
            raise self.error
        body = self.response_body
        if body is None:
            documents = operations[1::2]
            body = {
                "took": 3,
                "errors": False,
                "items": [
                    {"index": {"_index": index, "_id": str(n), "status": 201, "result": "created"}}
                    for n, _ in enumerate(documents)
                ],
            }
        return SimpleNamespace(meta=SimpleNamespace(status=self.status), body=body)

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_es(monkeypatch):
    FakeAsyncElasticsearch.instances = []
    monkeypatch.setattr(es_client, "AsyncElasticsearch", FakeAsyncElasticsearch)
    return FakeAsyncElasticsearch
