from app.errors import ErrorKind, STATUS_BY_KIND, malformed_request, storage_unavailable


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)

def test_kinds_map_to_client_and_server_errors():
    assert malformed_request("bad").http_status == 400
    assert storage_unavailable("down").http_status == 500

def test_response_body_carries_kind_and_message():
    err = storage_unavailable("disk I/O error")
    assert err.to_response() == {
        "error": {"kind": "storage_unavailable", "message": "disk I/O error"}
    }
