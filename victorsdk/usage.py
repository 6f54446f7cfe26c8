"""Walk through index creation, insertion, search and deletion on a server."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .client import ApiError, Client
from .commands import (
    ClientOptions,
    CreateIndexInput,
    DeleteVectorInput,
    InsertVectorInput,
    SearchVectorInput,
)

INDEX_NAME = "indice1"


def _show(output: object) -> None:
    print(output.status)
    print(output.message)
    print(output.results)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration against a server; return the exit status."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", default="8080")
    args = parser.parse_args(argv)

    vectors = [
        InsertVectorInput(INDEX_NAME, 1, [0.1, 0.2, 0.3, 0.4, 0.5]),
        InsertVectorInput(INDEX_NAME, 2, [0.6, 0.7, 0.8, 0.9, 1.0]),
        InsertVectorInput(INDEX_NAME, 3, [1.1, 1.2, 1.3, 1.4, 1.5]),
    ]
    steps = [
        ("Index creation error",
         lambda c: c.create_index(CreateIndexInput(0, 0, 5, INDEX_NAME))),
        *(("Vector insertion error", lambda c, v=v: c.insert_vector(v)) for v in vectors),
        ("Search error",
         lambda c: c.search_vector(
             SearchVectorInput(INDEX_NAME, 3, [1.5, 0.2, 2, -0.4, 0.9]))),
        ("Delete vector error",
         lambda c: c.delete_vector(DeleteVectorInput(INDEX_NAME, 1))),
    ]

    with Client(ClientOptions(host=args.host, port=args.port)) as client:
        for label, step in steps:
            try:
                output = step(client)
            except ApiError as exc:
                print(f"{label}: {exc}", file=sys.stderr)
                return 1
            _show(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())