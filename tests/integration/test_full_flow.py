"""Integration test: CLI -> processor -> ElasticTransport -> fake cluster.

The cluster is an in-memory ``httpx.MockTransport`` handler that keeps
its own index list, so deletes are visible to later queries.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from typer.testing import CliRunner

from elasticlean.bridge.transport import ElasticTransport
from elasticlean.cli.app import app
from elasticlean.core.processor import IndexProcessor

runner = CliRunner()


class FakeCluster:
    """Just enough of the Elasticsearch REST API for elasticlean."""

    def __init__(self, indices: list[str], documents: dict[str, list[dict[str, Any]]]) -> None:
        self.indices = list(indices)
        self.documents = documents
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.lstrip("/")
        if request.method == "GET" and path == "_cat/indices":
            return httpx.Response(200, json=[{"index": i, "health": "green"} for i in self.indices])
        if request.method == "GET" and path.endswith("/_search"):
            names = path[: -len("/_search")].split(",")
            hits = [
                {"_index": n, "_type": "doc", "_id": str(k), "_score": 1.0, "_source": doc}
                for n in names
                for k, doc in enumerate(self.documents.get(n, []))
            ]
            return httpx.Response(200, json={"hits": {"total": len(hits), "hits": hits}})
        if request.method == "DELETE":
            names = path.split(",")
            missing = [n for n in names if n not in self.indices]
            if missing:
                return httpx.Response(404, content=json.dumps({"error": missing}).encode())
            self.indices = [i for i in self.indices if i not in names]
            return httpx.Response(200, json={"acknowledged": True})
        return httpx.Response(405)

    def deletes(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "DELETE"]


@pytest.fixture
def cluster(catalog: list[str], dated, deprecate_record: dict[str, Any]) -> FakeCluster:
    indices = catalog + [dated("deprecate", 2), dated("deprecate", 15)]
    documents = {
        dated("deprecate", 2): [deprecate_record],
        dated("deprecate", 15): [deprecate_record, deprecate_record],
    }
    return FakeCluster(indices, documents)


@pytest.fixture
def live_processor(config, engine, cluster: FakeCluster) -> IndexProcessor:
    client = httpx.Client(transport=httpx.MockTransport(cluster))
    transport = ElasticTransport(config.base_url, client=client)
    return IndexProcessor(config, transport, engine=engine)


class TestFullFlow:
    def test_query_then_delete_then_query(self, live_processor: IndexProcessor, cluster, dated):
        before = runner.invoke(app, ["query", "-n", "app"], obj=live_processor)
        assert "Number of Indices: 5" in before.output

        dry = runner.invoke(app, ["delete", "-n", "app", "-e", "2", "-d"], obj=live_processor)
        assert dry.exit_code == 0
        assert "2 indices will be deleted" in dry.output
        assert cluster.deletes() == []

        real = runner.invoke(app, ["delete", "-n", "app", "-e", "2"], obj=live_processor)
        assert real.exit_code == 0
        (delete_request,) = cluster.deletes()
        assert delete_request.url.path == f"/{dated('app', 40)},{dated('app', 11)}"

        after = runner.invoke(app, ["query", "-n", "app"], obj=live_processor)
        assert "Number of Indices: 3" in after.output
        assert dated("app", 40) not in after.output

    def test_process_deprecate(self, live_processor: IndexProcessor, cluster):
        result = runner.invoke(app, ["process", "-n", "deprecate", "-s", "20"], obj=live_processor)
        assert result.exit_code == 0
        assert "Number of Documents: 3" in result.output
        (search,) = [r for r in cluster.requests if r.url.path.endswith("/_search")]
        names = search.url.path.strip("/").split("/")[0].split(",")
        assert names == sorted(names)

    def test_cluster_down_reports_transport_error(self, config, engine):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        processor = IndexProcessor(
            config, ElasticTransport(config.base_url, client=client), engine=engine
        )
        result = runner.invoke(app, ["query"], obj=processor)
        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_dry_run_survives_cluster_refusing_deletes(self, config, engine, catalog):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "DELETE":
                raise httpx.ConnectError("delete must not be sent", request=request)
            return httpx.Response(200, json=[{"index": i} for i in catalog])

        client = httpx.Client(transport=httpx.MockTransport(handler))
        processor = IndexProcessor(
            config, ElasticTransport(config.base_url, client=client), engine=engine
        )
        result = runner.invoke(app, ["delete", "-n", "app", "-e", "10", "-d"], obj=processor)
        assert result.exit_code == 0
        assert "dry-run" in result.output
