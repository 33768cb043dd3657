from __future__ import annotations

from types import SimpleNamespace

from starlette.routing import Mount

from cognitive_api.observability.metrics import _endpoint_label


def fake_request(route, path: str):
    return SimpleNamespace(scope={"route": route}, url=SimpleNamespace(path=path))


def test_label_restores_router_prefix_missing_from_route_path():
    request = fake_request(SimpleNamespace(path="/x/{i}"), "/api/x/3")
    assert _endpoint_label(request) == "/api/x/{i}"


def test_label_keeps_route_path_that_already_has_prefix():
    request = fake_request(SimpleNamespace(path="/api/summarize"), "/api/summarize")
    assert _endpoint_label(request) == "/api/summarize"


def test_label_for_static_mount_is_the_mount_path():
    request = fake_request(Mount("/uploads", app=lambda scope, receive, send: None), "/uploads/speech-1.mp3")
    assert _endpoint_label(request) == "/uploads"


def test_label_without_route_falls_back_to_request_path():
    assert _endpoint_label(fake_request(None, "/nope")) == "/nope"


def test_metrics_label_for_prefixed_route(client):
    client.get("/api/voices")

    body = client.get("/metrics").text
    assert 'endpoint="/api/voices",method="GET",status="200"' in body
