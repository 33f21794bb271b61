import json

import pytest

MIXED_DOC = {"name": "x", "items": [{"id": 1}, {"id": 2}]}

ORDERS_DOC = {
    "id": 7,
    "orders": [
        {"no": "A", "lines": [{"sku": "s1"}, {"sku": "s2"}]},
        {"no": "B", "lines": [{"sku": "s3"}]},
    ],
}


@pytest.fixture
def mixed_doc():
    return json.loads(json.dumps(MIXED_DOC))


@pytest.fixture
def orders_doc():
    return json.loads(json.dumps(ORDERS_DOC))


@pytest.fixture
def mixed_json_file(tmp_path):
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps(MIXED_DOC), encoding="utf-8")
    return path
