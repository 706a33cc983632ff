import pytest

import app as service
from minids import HashSet, IntList, RandomizedSet, myhash


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(service, "tree", RandomizedSet(seed=0))
    monkeypatch.setattr(service, "words", HashSet(hash_function=myhash))
    monkeypatch.setattr(service, "numbers", IntList())
    service.app.config["TESTING"] = True
    with service.app.test_client() as c:
        yield c


def test_parse_int_value():
    assert service.parse_int_value("42") == 42
    assert service.parse_int_value(" -7 ") == -7
    assert service.parse_int_value(5) == 5
    assert service.parse_int_value(True) is None
    assert service.parse_int_value("1.5") is None
    assert service.parse_int_value(None) is None


def test_status(client):
    body = client.get("/api/status").get_json()
    assert body["ok"] is True
    assert body["data"]["treeset_size"] == 0
    assert body["data"]["hashset_size"] == 0
    assert body["data"]["intlist_size"] == 0


def test_treeset_insert_and_query(client):
    for v in [5, 1, 9]:
        r = client.post("/api/treeset/insert", json={"value": v})
        assert r.status_code == 200

    assert client.get("/api/treeset/exists/1").get_json()["data"]["exists"] is True
    assert client.get("/api/treeset/exists/2").get_json()["data"]["exists"] is False
    assert client.get("/api/treeset/exists/-3").get_json()["data"]["exists"] is False

    stats = client.get("/api/treeset/stats").get_json()["data"]
    assert stats["size"] == 3
    assert stats["statistics"] == f"height {stats['height']}, size 3"

    rendered = client.get("/api/treeset/render").get_json()["data"]["tree"]
    assert rendered == str(service.tree)


def test_treeset_duplicate_is_conflict(client):
    client.post("/api/treeset/insert", json={"value": 4})
    r = client.post("/api/treeset/insert", json={"value": 4})
    assert r.status_code == 409
    assert r.get_json()["ok"] is False
    assert service.tree.size() == 1


def test_treeset_bad_input(client):
    assert client.post("/api/treeset/insert", json={}).status_code == 400
    assert client.post("/api/treeset/insert", json={"value": "abc"}).status_code == 400
    assert client.get("/api/treeset/exists/abc").status_code == 400


def test_hashset_routes(client):
    assert client.post("/api/hashset/insert", json={"value": "apple"}).status_code == 200
    assert client.post("/api/hashset/insert", json={"value": "apple"}).status_code == 409
    assert client.post("/api/hashset/insert", json={"value": 3}).status_code == 400

    assert client.get("/api/hashset/exists/apple").get_json()["data"]["exists"] is True
    assert client.get("/api/hashset/exists/pear").get_json()["data"]["exists"] is False

    stats = client.get("/api/hashset/stats").get_json()["data"]
    assert stats["size"] == 1
    assert stats["buckets"] == 1
    assert stats["reallocations"] == 0


def test_intlist_routes(client):
    client.post("/api/intlist/push_back", json={"value": 2})
    client.post("/api/intlist/push_front", json={"value": 1})
    body = client.get("/api/intlist").get_json()["data"]
    assert body == {"size": 2, "values": [1, 2]}

    r = client.post("/api/intlist/pop_front")
    assert r.get_json()["data"]["value"] == 1
    client.post("/api/intlist/pop_front")
    assert client.post("/api/intlist/pop_front").status_code == 400


def test_home_page(client):
    client.post("/api/treeset/insert", json={"value": 3})
    r = client.get("/")
    assert r.status_code == 200
    assert b"height 0, size 1" in r.data


def test_warm_start_loads_words(client, monkeypatch, tmp_path):
    words_file = tmp_path / "words.txt"
    words_file.write_text("alpha\nbeta\n\nalpha\ngamma\n", encoding="utf-8")
    monkeypatch.setattr(service, "DEFAULT_WORDS_PATH", str(words_file))
    monkeypatch.setitem(service.STATE, "words_loaded", False)

    service.warm_start()

    assert service.STATE["words_loaded"] is True
    assert service.words.size() == 3
    assert service.words.exists("gamma")
    # the service tree holds integers only
    assert service.tree.size() == 0


def test_warm_start_missing_file(client, monkeypatch, tmp_path):
    monkeypatch.setattr(service, "DEFAULT_WORDS_PATH", str(tmp_path / "nope.txt"))
    monkeypatch.setitem(service.STATE, "words_loaded", False)
    service.warm_start()
    assert service.STATE["words_loaded"] is False


@pytest.mark.parametrize("route", [
    "/api/treeset/insert",
    "/api/hashset/insert",
    "/api/intlist/push_back",
])
@pytest.mark.parametrize("body", [5, "value", [1]])
def test_non_object_json_body_is_bad_request(client, route, body):
    r = client.post(route, json=body)
    assert r.status_code == 400
    assert r.get_json()["ok"] is False


def test_invalid_seed_logs_warning(caplog, monkeypatch):
    monkeypatch.setitem(service.STATE, "seed", None)
    with caplog.at_level("WARNING", logger="minids.app"):
        tree = service._make_tree("abc")
    assert tree.size() == 0
    assert service.STATE["seed"] is None
    assert "MINIDS_SEED" in caplog.text


def test_valid_seed_is_recorded(monkeypatch):
    monkeypatch.setitem(service.STATE, "seed", None)
    service._make_tree("17")
    assert service.STATE["seed"] == 17


def test_parse_port(caplog):
    assert service.parse_port("8080") == 8080
    with caplog.at_level("WARNING", logger="minids.app"):
        assert service.parse_port("http") == service.DEFAULT_PORT
        assert service.parse_port("70000") == service.DEFAULT_PORT
    assert "MINIDS_PORT" in caplog.text
