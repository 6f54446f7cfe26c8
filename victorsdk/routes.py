"""URL paths of the vector server's HTTP API."""


def create_index_path(index_name: str) -> str:
    return f"/api/index/{index_name}"


def insert_vector_path(index_name: str) -> str:
    return f"/api/vector/{index_name}"


def delete_vector_path(index_name: str, vector_id: object) -> str:
    return f"/api/vector/{index_name}/{vector_id}"


def search_vector_path(index_name: str) -> str:
    return f"/api/vector/{index_name}/search"