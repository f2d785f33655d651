import pytest
from pytest_httpx import HTTPXMock

from esapi import (
    AUTO,
    AsyncClient,
    BoundEndpoint,
    Client,
    Config,
    ConstructionError,
    HttpxTransport,
    Namespace,
    with_index,
    with_param,
)


@pytest.fixture
def client(config: Config, transport) -> Client:
    return Client(config, transport=transport)


class TestClient:
    def test_top_level_endpoints(self, client: Client):
        assert isinstance(client.search, BoundEndpoint)
        assert isinstance(client.info, BoundEndpoint)
        assert client.search.endpoint.name == "search"

    def test_namespaces(self, client: Client):
        assert set(client.namespaces) == {
            "cat",
            "cluster",
            "indices",
            "ingest",
            "nodes",
            "snapshot",
            "tasks",
        }
        assert isinstance(client.indices, Namespace)
        assert client.indices.create.endpoint.name == "indices.create"
        assert "health" in dir(client.cat)
        assert all(
            bound.endpoint.namespace == "cluster" for bound in client.cluster
        )

    def test_every_endpoint_is_bound(self, client: Client):
        for name in client.endpoints:
            head, _, short = name.rpartition(".")
            owner = getattr(client, head) if head else client
            assert getattr(owner, short).endpoint.name == name

    def test_call_with_keywords(self, client: Client, transport):
        response = client.search(index=["logs-*"], size=0, track_total_hits=True)

        assert response.status_code == 200
        assert transport.last.path == "/logs-*/_search"
        assert transport.last.params == {"size": "0", "track_total_hits": "true"}

    def test_call_with_positional_path_arguments(self, client: Client, transport):
        client.indices.create("my-index", body=b"{}")

        assert transport.last.method == "PUT"
        assert transport.last.path == "/my-index"
        assert transport.last.content == b"{}"

    def test_call_with_options(self, client: Client, transport):
        client.search(with_index("a", "b"), with_param("size", 3), pretty=True)

        assert transport.last.path == "/a,b/_search"
        assert transport.last.params == {"pretty": "true", "size": "3"}

    def test_delete_by_query_with_slices(self, client: Client, transport):
        client.delete_by_query(["logs"], body=b"{}", slices=AUTO, conflicts="proceed")

        assert transport.last.method == "POST"
        assert transport.last.path == "/logs/_delete_by_query"
        assert transport.last.params == {"conflicts": "proceed", "slices": "auto"}

    def test_cat_endpoint(self, client: Client, transport):
        client.cat.indices(format="json", h=["index", "docs.count"], v=True)

        assert transport.last.path == "/_cat/indices"
        assert transport.last.params == {
            "format": "json",
            "h": "index,docs.count",
            "v": "true",
        }

    def test_construction_error(self, client: Client, transport):
        with pytest.raises(ConstructionError, match="get"):
            client.get("idx")

        assert transport.requests == []

    def test_request_builds_without_sending(self, client: Client, transport):
        request = client.ping.request(pretty=True)

        assert request.spec().params == {"pretty": "true"}
        assert transport.requests == []

    def test_repr(self, client: Client):
        assert repr(client.search) == "<BoundEndpoint search>"
        assert repr(client.tasks).startswith("<Namespace tasks: cancel, get, list")

    def test_does_not_close_given_transport(self, config: Config, transport):
        with Client(config, transport=transport) as client:
            client.info()

        assert len(transport.requests) == 1

    def test_default_transport(self, httpx_mock: HTTPXMock, config: Config):
        httpx_mock.add_response(status_code=200, json={"version": {"number": "7.17.0"}})

        with Client(config) as client:
            assert isinstance(client.transport, HttpxTransport)
            with client.info() as response:
                assert response.json()["version"]["number"] == "7.17.0"


class TestApiVersions:
    def test_v6_document_paths_need_a_type(self, transport):
        client = Client(Config(api_version=6), transport=transport)

        client.get("idx", "tweet", "1")

        assert transport.last.path == "/idx/tweet/1"

    def test_v6_rejects_v7_parameters(self, transport):
        client = Client(Config(api_version=6), transport=transport)

        with pytest.raises(ConstructionError, match="ccs_minimize_roundtrips"):
            client.search(ccs_minimize_roundtrips=True)

    def test_v5_source_filters(self, transport):
        client = Client(Config(api_version=5), transport=transport)

        client.search(source_include=["title"], source_exclude=["body"])

        assert transport.last.params == {
            "_source_exclude": "body",
            "_source_include": "title",
        }


class TestAsyncClient:
    @pytest.mark.anyio
    async def test_call(self, config: Config, async_transport):
        client = AsyncClient(config, transport=async_transport)

        response = await client.indices.exists("idx")

        assert response.status_code == 200
        assert async_transport.last.method == "HEAD"
        assert async_transport.last.path == "/idx"

    @pytest.mark.anyio
    async def test_default_transport(self, httpx_mock: HTTPXMock, config: Config):
        httpx_mock.add_response(status_code=200)

        async with AsyncClient(config) as client:
            async with await client.ping() as response:
                assert response.status_code == 200

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.method == "HEAD"
