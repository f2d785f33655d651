import httpx
import pytest

from esapi import Response


def _response(
    status_code: int = 200, content: bytes = b"", headers: list[tuple[str, str]] | None = None
) -> Response:
    raw = httpx.Response(status_code, headers=headers or [], content=content)
    return Response(status_code=raw.status_code, headers=raw.headers, body=raw)


class TestResponse:
    @pytest.mark.parametrize(
        "status_code, expected",
        [(200, False), (201, False), (299, False), (300, True), (404, True), (500, True)],
    )
    def test_is_error(self, status_code: int, expected: bool):
        assert _response(status_code).is_error() is expected

    def test_warnings(self):
        response = _response(
            headers=[
                ("Warning", '299 Elasticsearch-7.10.0 "[types removal] deprecated"'),
                ("Warning", '299 Elasticsearch-7.10.0 "another"'),
            ]
        )

        assert response.has_warnings()
        assert response.warnings() == [
            '299 Elasticsearch-7.10.0 "[types removal] deprecated"',
            '299 Elasticsearch-7.10.0 "another"',
        ]

    def test_no_warnings(self):
        response = _response()

        assert not response.has_warnings()
        assert response.warnings() == []

    def test_json(self):
        response = _response(content=b'{"acknowledged": true}')

        assert response.json() == {"acknowledged": True}

    def test_str_with_body(self):
        response = _response(content=b'{"ok": true}')
        response.read()

        assert str(response) == '[200 OK] {"ok": true}'

    def test_str_without_body(self):
        assert str(_response(404)) == "[404 Not Found]"

    def test_str_unknown_status(self):
        assert str(_response(599)) == "[599]"

    def test_str_does_not_consume_stream(self):
        raw = httpx.Response(200, content=iter([b"pay", b"load"]))
        response = Response(status_code=200, headers=raw.headers, body=raw)

        assert str(response) == "[200 OK]"
        assert response.read() == b"payload"

    def test_context_manager_closes_body(self):
        with _response(content=b"{}") as response:
            response.read()

        assert response.body.is_closed

    @pytest.mark.anyio
    async def test_async_read(self):
        raw = httpx.Response(200, content=b'{"a": 1}')
        response = Response(status_code=200, headers=raw.headers, body=raw)

        async with response:
            assert await response.aread() == b'{"a": 1}'
            assert response.json() == {"a": 1}
