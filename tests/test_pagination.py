from botlistspace import Pagination


def test_items_keep_insertion_order():
    pagination = Pagination({"page": 1, "limit": 2, "total": 2, "bots": [{"id": "a"}, {"id": "b"}]})

    for raw in [{"id": "a"}, {"id": "b"}]:
        pagination.set(raw["id"], raw)

    assert pagination.has("a") is True
    assert len(pagination.array()) == 2
    assert pagination.key_array() == ["a", "b"]


def test_envelope_does_not_fill_items():
    pagination = Pagination({"page": 1, "bots": [{"id": "a"}]})

    assert len(pagination) == 0


def test_page_count_is_derived_from_total_and_limit():
    pagination = Pagination({"page": 2, "limit": 50, "total": 101})

    assert pagination.page == 2
    assert pagination.page_count == 3
    assert pagination.has_next is True


def test_page_count_prefers_server_value():
    pagination = Pagination({"page": 4, "limit": 50, "total": 101, "pages": 4})

    assert pagination.page_count == 4
    assert pagination.has_next is False


def test_missing_metadata():
    pagination = Pagination({})

    assert pagination.page == 1
    assert pagination.limit is None
    assert pagination.total is None
    assert pagination.page_count is None
    assert pagination.has_next is False
