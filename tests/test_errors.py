import logging

import pytest

def test_malformed_json_is_400(client):
    r = client.post("/api/data", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"detail": "Malformed JSON body"}

def test_truncated_json_is_400(client):
    r = client.post("/api/data", content='{"sample": "Hello', headers={"Content-Type": "application/json"})
    assert r.status_code == 400

def test_malformed_json_is_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="mobile-backend"):
        client.post("/api/data", content="[1, 2", headers={"Content-Type": "application/json"})
    assert "Rejected malformed JSON body on /api/data" in caplog.text

def test_valid_request_after_bad_one(client):
    client.post("/api/data", content="oops", headers={"Content-Type": "application/json"})
    r = client.post("/api/data", json={"ok": True})
    assert r.status_code == 200
    assert r.json()["data"] == {"ok": True}

@pytest.mark.parametrize("raw", ["NaN", '{"x": Infinity}', "[-Infinity]", '{"a": [1, NaN]}'])
def test_non_finite_constants_are_400(client, raw):
    r = client.post("/api/data", content=raw, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"detail": "Malformed JSON body"}

def test_deeply_nested_body_is_400(client, caplog):
    depth = 100000
    with caplog.at_level(logging.WARNING, logger="mobile-backend"):
        r = client.post("/api/data", content="[" * depth + "]" * depth, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"detail": "Malformed JSON body"}
    assert "Rejected malformed JSON body on /api/data" in caplog.text

def test_invalid_utf8_is_400(client):
    r = client.post("/api/data", content=b'{"x": "\xff"}', headers={"Content-Type": "application/json"})
    assert r.status_code == 400

def test_moderate_nesting_is_echoed(client):
    value = [[[[[[[[[[{"deep": True}]]]]]]]]]]
    r = client.post("/api/data", json=value)
    assert r.status_code == 200
    assert r.json()["data"] == value
