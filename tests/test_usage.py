import pytest
import responses

from victorsdk.usage import main

BASE = "http://localhost:8080"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _register_all(rsps, base):
    rsps.add(responses.POST, base + "/api/index/indice1",
             json={"status": "created-index", "message": "m1",
                   "results": {"index_name": "indice1", "dims": 5}})
    rsps.add(responses.POST, base + "/api/vector/indice1", status=201,
             json={"status": "inserted", "message": "m2", "results": {"id": 1}})
    rsps.add(responses.GET, base + "/api/vector/indice1/search",
             json={"status": "searched", "message": "m3",
                   "results": {"id": 3, "distance": 0.5}})
    rsps.add(responses.DELETE, base + "/api/vector/indice1/1",
             json={"status": "deleted", "message": "m4", "results": {"id": 1}})


def test_full_run_succeeds(mock, capsys):
    _register_all(mock, BASE)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "created-index" in out
    assert out.count("inserted") == 3
    assert "searched" in out
    assert "deleted" in out
    methods = [call.request.method for call in mock.calls]
    assert methods == ["POST", "POST", "POST", "POST", "GET", "DELETE"]


def test_port_option_is_used(mock, capsys):
    _register_all(mock, "http://localhost:9000")
    assert main(["--port", "9000"]) == 0
    assert mock.calls[0].request.url.startswith("http://localhost:9000/")


def test_failure_stops_run(mock, capsys):
    mock.add(responses.POST, BASE + "/api/index/indice1", status=500,
             json={"message": "boom"})
    assert main([]) == 1
    err = capsys.readouterr().err
    assert "Index creation error: API error: boom" in err
    assert len(mock.calls) == 1