import pytest

from esapi import (
    CancellationToken,
    RequestConfiguration,
    with_body,
    with_cancel,
    with_document_type,
    with_error_trace,
    with_filter_path,
    with_header,
    with_headers,
    with_human,
    with_index,
    with_opaque_id,
    with_param,
    with_path,
    with_pretty,
)


@pytest.fixture
def configuration() -> RequestConfiguration:
    return RequestConfiguration()


class TestParamOptions:
    def test_last_write_wins(self, configuration: RequestConfiguration):
        with_param("size", 10)(configuration)
        with_param("size", 20)(configuration)

        assert configuration.params == {"size": 20}

    def test_none_unsets(self, configuration: RequestConfiguration):
        with_param("size", 10)(configuration)
        with_param("size", None)(configuration)

        assert "size" not in configuration.params

    def test_false_and_zero_are_kept(self, configuration: RequestConfiguration):
        with_param("explain", False)(configuration)
        with_param("size", 0)(configuration)

        assert configuration.params == {"explain": False, "size": 0}

    def test_list_is_copied(self, configuration: RequestConfiguration):
        sort = ["a"]
        with_param("sort", sort)(configuration)
        sort.append("b")

        assert configuration.params["sort"] == ("a",)

    def test_universal_helpers(self, configuration: RequestConfiguration):
        for option in (
            with_pretty(),
            with_human(False),
            with_error_trace(),
            with_filter_path("took", "hits.hits._id"),
        ):
            option(configuration)

        assert configuration.params == {
            "pretty": True,
            "human": False,
            "error_trace": True,
            "filter_path": ("took", "hits.hits._id"),
        }


class TestPathOptions:
    def test_with_index(self, configuration: RequestConfiguration):
        with_index("a", "b")(configuration)

        assert configuration.path == {"index": ("a", "b")}

    def test_with_index_empty(self, configuration: RequestConfiguration):
        with_index()(configuration)

        assert configuration.path == {"index": ()}

    def test_with_document_type(self, configuration: RequestConfiguration):
        with_document_type("t1", "t2")(configuration)

        assert configuration.path == {"doc_type": ("t1", "t2")}

    def test_with_path_none_unsets(self, configuration: RequestConfiguration):
        with_path("id", "1")(configuration)
        with_path("id", None)(configuration)

        assert configuration.path == {}


class TestHeaderOptions:
    def test_repeated_header_adds_values(self, configuration: RequestConfiguration):
        with_header("X-Custom", "a")(configuration)
        with_header("X-Custom", "b")(configuration)

        assert configuration.headers == [("X-Custom", "a"), ("X-Custom", "b")]

    def test_with_headers_mapping(self, configuration: RequestConfiguration):
        with_headers({"X-One": "1", "X-Many": ["a", "b"]})(configuration)

        assert configuration.headers == [
            ("X-One", "1"),
            ("X-Many", "a"),
            ("X-Many", "b"),
        ]

    def test_with_headers_pairs(self, configuration: RequestConfiguration):
        with_headers([("X-One", "1"), ("X-One", "2")])(configuration)

        assert configuration.headers == [("X-One", "1"), ("X-One", "2")]

    def test_opaque_id(self, configuration: RequestConfiguration):
        with_opaque_id("job-42")(configuration)

        assert configuration.headers == [("X-Opaque-Id", "job-42")]


class TestOtherOptions:
    def test_body_last_write_wins(self, configuration: RequestConfiguration):
        with_body(b"first")(configuration)
        with_body(b"second")(configuration)

        assert configuration.body == b"second"

    def test_cancel(self, configuration: RequestConfiguration):
        token = CancellationToken()

        with_cancel(token)(configuration)

        assert configuration.cancel is token

    def test_options_are_reusable(self):
        option = with_param("size", 5)
        first, second = RequestConfiguration(), RequestConfiguration()

        option(first)
        option(second)

        assert first.params == second.params == {"size": 5}

    def test_repr(self):
        assert repr(with_param("size", 5)) == "Option(size=5)"
