import pytest

from esapi import ENDPOINTS, ConstructionError, ParamType, endpoints_for
from esapi._utils import RequestConfiguration, encode

_METHODS = {"GET", "POST", "PUT", "DELETE", "HEAD"}


def _minimal_configuration(endpoint) -> RequestConfiguration:
    return RequestConfiguration(path={name: "x" for name in endpoint.required})


class TestTables:
    def test_names_are_unique(self):
        names = [endpoint.name for endpoint in ENDPOINTS]

        assert len(names) == len(set(names))

    @pytest.mark.parametrize("api_version", [5, 6, 7])
    def test_every_endpoint_encodes_with_required_arguments(self, api_version: int):
        for endpoint in endpoints_for(api_version).values():
            assert endpoint.method in _METHODS, endpoint.name

            spec = encode(endpoint, _minimal_configuration(endpoint))

            assert spec.path.startswith("/"), endpoint.name
            assert "{" not in spec.path, endpoint.name

    def test_same_names_across_versions(self):
        assert set(endpoints_for(5)) == set(endpoints_for(6)) == set(endpoints_for(7))

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            endpoints_for(7)["search"] = None  # type: ignore[index]

    def test_unsupported_version(self):
        with pytest.raises(ValueError, match="unsupported"):
            endpoints_for(8)

    def test_namespaces(self):
        namespaces = {endpoint.namespace for endpoint in ENDPOINTS}

        assert namespaces == {
            None,
            "cat",
            "cluster",
            "indices",
            "ingest",
            "nodes",
            "snapshot",
            "tasks",
        }


class TestSelectedEndpoints:
    def test_search(self):
        search = endpoints_for(7)["search"]

        assert search.method == "GET"
        assert search.body
        assert search.required == ()
        assert search.param("from_").key == "from"
        assert search.param("query").key == "q"
        assert search.param("track_total_hits").type is ParamType.BOOL_OR_INT

    def test_delete_by_query(self):
        endpoint = endpoints_for(7)["delete_by_query"]

        assert endpoint.required == ("index",)
        assert endpoint.param("slices").type is ParamType.SLICES
        assert endpoint.param("max_docs") is not None

    def test_bulk_is_ndjson(self):
        assert endpoints_for(7)["bulk"].content_type == "application/x-ndjson"

    def test_hot_threads_type_key(self):
        hot_threads = endpoints_for(7)["nodes.hot_threads"]

        assert hot_threads.param("doc_type").key == "type"

    def test_put_script_templates(self):
        put_script = endpoints_for(7)["put_script"]

        with_context = RequestConfiguration(path={"id": "s1", "context": "score"})
        without = RequestConfiguration(path={"id": "s1"})

        assert encode(put_script, with_context).path == "/_scripts/s1/score"
        assert encode(put_script, without).path == "/_scripts/s1"


class TestLegacyTables:
    def test_v6_document_paths(self):
        table = endpoints_for(6)

        assert table["get"].required == ("index", "doc_type", "id")
        assert table["update"].paths == ("/{index}/{doc_type}/{id}/_update",)

    def test_v6_drops_max_docs(self):
        table = endpoints_for(6)

        assert table["delete_by_query"].param("max_docs") is None
        assert table["reindex"].param("max_docs") is None

    def test_v5_source_spelling(self):
        search = endpoints_for(5)["search"]

        assert search.param("source_include").key == "_source_include"
        assert search.param("source_includes") is None
        assert search.param("track_total_hits") is None
        assert search.param("fielddata_fields") is not None

    def test_v5_rejects_plural_source_filter(self):
        configuration = RequestConfiguration(params={"source_includes": ["a"]})

        with pytest.raises(ConstructionError, match="source_includes"):
            encode(endpoints_for(5)["search"], configuration)

    def test_v7_is_default(self):
        assert endpoints_for() is endpoints_for(7)
