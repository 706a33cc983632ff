import os
import time
import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, render_template_string

from minids import HashSet, IntList, RandomizedSet, myhash

logging.basicConfig(
    level=os.environ.get("MINIDS_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("minids.app")

DEFAULT_WORDS_PATH = os.environ.get("MINIDS_WORDS_PATH", "")
DEFAULT_SEED = os.environ.get("MINIDS_SEED", "")
HOST = os.environ.get("MINIDS_HOST", "127.0.0.1")
DEFAULT_PORT = 5000

app = Flask(__name__)

STATE: Dict[str, Any] = {"words_path": None, "words_loaded": False, "seed": None}


def parse_int_value(raw: Any) -> Optional[int]:
    """
    Accepts an int or a decimal string (optional leading '-').
    Returns None for anything else, including booleans.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    s = str(raw if raw is not None else "").strip()
    try:
        return int(s, 10)
    except ValueError:
        return None


def parse_port(raw: str) -> int:
    port = parse_int_value(raw)
    if port is None or not 0 < port < 65536:
        logger.warning("Invalid MINIDS_PORT %r; using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port

def _make_tree(raw_seed: str) -> RandomizedSet:
    seed = None
    if raw_seed:
        seed = parse_int_value(raw_seed)
        if seed is None:
            logger.warning("Invalid MINIDS_SEED %r; seeding from OS entropy", raw_seed)
    STATE["seed"] = seed
    return RandomizedSet(seed=seed)


PORT = parse_port(os.environ.get("MINIDS_PORT", str(DEFAULT_PORT)))
tree = _make_tree(DEFAULT_SEED)
words = HashSet(hash_function=myhash)
numbers = IntList()


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def json_value():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None, err("JSON body must be an object")
    if "value" not in data:
        return None, err("JSON body with a 'value' field is required")
    return data["value"], None

def warm_start():
    """Load the configured word list into the hash set."""
    words_path = (DEFAULT_WORDS_PATH or "").strip()
    STATE["words_path"] = words_path or None

    if not words_path:
        logger.info("[warm_start] No word list configured.")
        return
    if not os.path.exists(words_path):
        logger.warning("[warm_start] Word list not found: %s", words_path)
        return

    logger.info("[warm_start] Loading words: %s", words_path)
    t0 = time.time()
    with open(words_path, mode="r", encoding="utf-8") as fd:
        for line in fd:
            word = line.strip()
            if word:
                words.add(word)
    t1 = time.time()
    STATE["words_loaded"] = True
    logger.info("[warm_start] Hash set loaded: %d words in %.2fs (%d buckets)",
                words.size(), t1 - t0, words.buckets())


@app.get("/api/status")
def api_status():
    return ok({
        "words_path": STATE["words_path"],
        "words_loaded": STATE["words_loaded"],
        "seed": STATE["seed"],
        "treeset_size": tree.size(),
        "hashset_size": words.size(),
        "intlist_size": numbers.size(),
    })


# ------------------ Tree set ------------------
@app.post("/api/treeset/insert")
def api_treeset_insert():
    raw, r = json_value()
    if r is not None:
        return r

    value = parse_int_value(raw)
    if value is None:
        return err("value must be an integer")

    if not tree.add(value):
        return err("insert rejected (value already present)", 409)
    return ok({"value": value, "size": tree.size(), "height": tree.height()})

@app.get("/api/treeset/exists/<raw>")
def api_treeset_exists(raw: str):
    value = parse_int_value(raw)
    if value is None:
        return err("value must be an integer")
    return ok({"value": value, "exists": tree.exists(value)})

@app.get("/api/treeset/stats")
def api_treeset_stats():
    return ok({
        "height": tree.height(),
        "size": tree.size(),
        "statistics": f"height {tree.height()}, size {tree.size()}",
    })

@app.get("/api/treeset/render")
def api_treeset_render():
    return ok({"tree": str(tree)})


# ------------------ Hash set ------------------
@app.post("/api/hashset/insert")
def api_hashset_insert():
    raw, r = json_value()
    if r is not None:
        return r
    if not isinstance(raw, str) or not raw:
        return err("value must be a non-empty string")

    if not words.add(raw):
        return err("insert rejected (value already present)", 409)
    return ok({"value": raw, "size": words.size()})

@app.get("/api/hashset/exists/<value>")
def api_hashset_exists(value: str):
    return ok({"value": value, "exists": words.exists(value)})

@app.get("/api/hashset/stats")
def api_hashset_stats():
    return ok({
        "size": words.size(),
        "buckets": words.buckets(),
        "collisions": words.collisions(),
        "reallocations": words.reallocations(),
        "maximal": words.maximal(),
        "load_factor": round(words.load_factor(), 4),
    })


# ------------------ Int list ------------------
@app.get("/api/intlist")
def api_intlist():
    return ok({"size": numbers.size(), "values": list(numbers)})

def _push(push):
    raw, r = json_value()
    if r is not None:
        return r
    value = parse_int_value(raw)
    if value is None:
        return err("value must be an integer")
    push(value)
    return ok({"size": numbers.size(), "values": list(numbers)})

@app.post("/api/intlist/push_front")
def api_intlist_push_front():
    return _push(numbers.push_front)

@app.post("/api/intlist/push_back")
def api_intlist_push_back():
    return _push(numbers.push_back)

@app.post("/api/intlist/pop_front")
def api_intlist_pop_front():
    try:
        value = numbers.pop_front()
    except IndexError:
        return err("list is empty")
    return ok({"value": value, "size": numbers.size()})


HTML = r"""
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>minids</title>
  <style>
    body { font-family: system-ui, sans-serif; margin: 2rem; }
    pre { background: #f4f4f4; padding: 1rem; white-space: pre-wrap; word-break: break-all; }
  </style>
</head>
<body>
  <h1>minids</h1>
  <h2>Randomized tree set</h2>
  <p>{{ tree_stats }}</p>
  <pre>{{ tree_render }}</pre>
  <h2>Hash set</h2>
  <p>{{ words_size }} words in {{ words_buckets }} buckets, {{ words_collisions }} collisions</p>
  <h2>Int list</h2>
  <pre>{{ numbers }}</pre>
</body>
</html>
"""

@app.get("/")
def home():
    return render_template_string(
        HTML,
        tree_stats=f"height {tree.height()}, size {tree.size()}",
        tree_render=str(tree),
        words_size=words.size(),
        words_buckets=words.buckets(),
        words_collisions=words.collisions(),
        numbers=list(numbers),
    )

if __name__ == "__main__":
    warm_start()
    app.run(host=HOST, port=PORT, debug=True, use_reloader=False)
