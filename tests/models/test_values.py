import pytest

from esapi import AUTO, Auto, ConstructionError, EsApiError, RequestCancelledError, TransportError
from esapi.models.values import parse_slice_count


class TestSliceCount:
    @pytest.mark.parametrize(
        "value, expected", [(1, 1), (8, 8), (AUTO, AUTO), ("auto", AUTO), ("AUTO", AUTO)]
    )
    def test_valid(self, value: object, expected: object):
        assert parse_slice_count(value) == expected

    @pytest.mark.parametrize("value", [0, -1, True, "5", "", 1.5, None])
    def test_invalid(self, value: object):
        with pytest.raises(ValueError):
            parse_slice_count(value)

    def test_auto_renders_as_keyword(self):
        assert str(AUTO) == "auto"
        assert Auto("auto") is AUTO


class TestErrors:
    def test_construction_error_is_value_error(self):
        error = ConstructionError("missing required path argument(s): id", "get")

        assert isinstance(error, ValueError)
        assert isinstance(error, EsApiError)
        assert str(error) == "get: missing required path argument(s): id"
        assert error.message == "missing required path argument(s): id"
        assert error.endpoint == "get"

    def test_construction_error_without_endpoint(self):
        assert str(ConstructionError("bad")) == "bad"

    def test_cancelled_is_transport_error(self):
        error = RequestCancelledError()

        assert isinstance(error, TransportError)
        assert str(error) == "Request was cancelled"
        assert error.request is None
