# victorsdk

This is a small Python client for a Victor vector search server. It uses the
server's HTTP API to create an index, insert vectors, find the nearest
neighbour of a query vector and delete vectors.

## Installation

```
pip install victorsdk
```

## Usage

```python
from victorsdk.client import ApiError, Client
from victorsdk.commands import (
    ClientOptions,
    CreateIndexInput,
    DeleteVectorInput,
    InsertVectorInput,
    SearchVectorInput,
)

with Client(ClientOptions(host="localhost", port="8080")) as client:
    created = client.create_index(
        CreateIndexInput(index_type=0, method=0, dims=5, index_name="indice1")
    )
    print(created.status, created.message, created.results.index_name)

    client.insert_vector(
        InsertVectorInput(index_name="indice1", id=1, vector=[0.1, 0.2, 0.3, 0.4, 0.5])
    )

    found = client.search_vector(
        SearchVectorInput(index_name="indice1", top_k=3, vector=[1.5, 0.2, 2, -0.4, 0.9])
    )
    print(found.results.id, found.results.distance)

    client.delete_vector(DeleteVectorInput(index_name="indice1", vector_id=1))
```

### Connection

- The host defaults to `localhost` and the port to `7007`. An empty host or
  port also falls back to these defaults.
- `localhost` and `127.0.0.1` are reached over plain HTTP. Every other host is
  reached over HTTPS.
- The resulting address is available as `client.base_url`, and
  `client.is_local` tells whether the host is local.
- Requests time out after 30 seconds.
- `Client.close()` releases the HTTP session. Using the client as a context
  manager does this for you.

`ClientOptions` also has an `auto_start_daemon` field. The client does not
use it, and it never starts a server.

### Commands and replies

All of these are dataclasses in `victorsdk.commands`.

Inputs:

- `CreateIndexInput(index_type, method, dims, index_name)` raises
  `ValueError` if `dims` is outside 0–65535.
- `InsertVectorInput(index_name, id, vector)` raises `ValueError` if `id` is
  outside the unsigned 64-bit range.
- `DeleteVectorInput(index_name, vector_id)` raises `ValueError` if
  `vector_id` is outside the unsigned 64-bit range.
- `SearchVectorInput(index_name, top_k, vector)` sends the vector as
  comma-separated decimals together with `k`. `query_params()` shows both
  values.

`InsertVectorInput` rounds its vector values to single precision.

Replies:

- `CreateIndexOutput`
- `InsertVectorOutput`
- `SearchOutput`
- `DeleteVectorOutput`

Each reply has `status`, `message` and `results`. For `SearchOutput`,
`results` is a single `MatchResult` with `id` and `distance`. Fields missing
from the server's JSON get empty or zero defaults.

### Errors

Every failure raises `victorsdk.client.ApiError`. Its `status_code` attribute
holds the HTTP status when there is one. A failure can be any of these:

- The request cannot be sent.
- The server answers with an error status. The text then carries the server's
  `message` when the body provides one.
- The reply is not a JSON object.

`insert_vector` accepts both 200 and 201 as success. The other calls accept
only 200.

## Routes

`victorsdk.routes` builds the API paths:

- `create_index_path(index_name)` gives `/api/index/<name>`
- `insert_vector_path(index_name)` gives `/api/vector/<name>`
- `delete_vector_path(index_name, vector_id)` gives `/api/vector/<name>/<id>`
- `search_vector_path(index_name)` gives `/api/vector/<name>/search`

## Index statistics and error codes

`victorsdk.stats` provides `TimeStat` (with `count`, `total`, `last`, `min`
and `max`) and `IndexStats` (with `insert`, `delete`, `dump`, `search` and
`search_n`). Both convert to and from dictionaries with `from_dict` and
`to_dict`.

`victorsdk.errors` provides three things:

- `ErrorCode`, the index status codes, where `message()` gives each code's
  description.
- `VictorError`, an exception built from a code. Unknown codes produce
  `unknown error code: <n>`.
- `raise_for_code(code)`, which raises `VictorError` for any code other than
  `SUCCESS`.

## What this package does not do

This package is only a client. It holds no vector index of its own, performs
no search locally and runs no server. The statistics and error-code types are
plain data. No call in the client produces or returns them.

## Demo

Start a server on `localhost:8080`, then run:

```
victorsdk-demo
```

Use `--host` and `--port` to point the demo at another server.

The demo works through these steps, printing each response as it goes:

1. Create the index `indice1`.
2. Insert three vectors.
3. Run a search.
4. Delete vector 1.

If a step fails, the demo reports the error on standard error and exits with
status 1.

## Development

```
pip install -e ".[test]"
pytest
```