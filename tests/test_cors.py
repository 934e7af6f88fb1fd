from werkzeug.test import Client
from werkzeug.wrappers import Response

from weddinggame.cors import CORSMiddleware

EXPECTED_ALLOW_HEADERS = (
    "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, "
    "accept, origin, Cache-Control, X-Requested-With"
)


def _make_app(calls):
    def app(environ, start_response):
        calls.append(environ["REQUEST_METHOD"])
        return Response("ok", status=200)(environ, start_response)

    return app


def test_cors_headers_are_added():
    calls = []
    client = Client(CORSMiddleware(_make_app(calls)))
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Credentials"] == "true"
    assert response.headers["Access-Control-Allow-Headers"] == EXPECTED_ALLOW_HEADERS
    assert response.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS, GET, PUT"
    assert response.get_data(as_text=True) == "ok"
    assert calls == ["GET"]


def test_cors_options_short_circuits():
    calls = []
    client = Client(CORSMiddleware(_make_app(calls)))
    response = client.open("/", method="OPTIONS")
    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert calls == []