import pytest

from victorsdk import routes


@pytest.mark.parametrize(
    "name,expected",
    [
        ("indice1", "/api/index/indice1"),
        ("vectors", "/api/index/vectors"),
        ("a-b_c", "/api/index/a-b_c"),
    ],
)
def test_create_index_path(name, expected):
    assert routes.create_index_path(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("indice1", "/api/vector/indice1"),
        ("vectors", "/api/vector/vectors"),
    ],
)
def test_insert_vector_path(name, expected):
    assert routes.insert_vector_path(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("indice1", "/api/vector/indice1/search"),
        ("vectors", "/api/vector/vectors/search"),
    ],
)
def test_search_vector_path(name, expected):
    assert routes.search_vector_path(name) == expected


@pytest.mark.parametrize(
    "name,vector_id,expected",
    [
        ("indice1", 1, "/api/vector/indice1/1"),
        (
            "vectors",
            18446744073709551615,
            "/api/vector/vectors/18446744073709551615",
        ),
    ],
)
def test_delete_vector_path(name, vector_id, expected):
    assert routes.delete_vector_path(name, vector_id) == expected


def test_pinned_paths():
    assert routes.create_index_path("indice1") == "/api/index/indice1"
    assert routes.search_vector_path("indice1") == "/api/vector/indice1/search"


def test_search_path_extends_insert_path():
    name = "indice1"
    assert routes.search_vector_path(name).startswith(routes.insert_vector_path(name) + "/")
    assert routes.delete_vector_path(name, 7).startswith(routes.insert_vector_path(name) + "/")