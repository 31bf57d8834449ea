from errors import ErrorKind, ModelInvocationError, STATUS_BY_KIND, UpstreamFetchError, ValidationError


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


def test_error_kinds_map_to_status():
    assert ValidationError("x").status_code == 400
    assert UpstreamFetchError("x").status_code == 500
    assert ModelInvocationError("x").status_code == 500


def test_empty_message_falls_back_to_class_name():
    assert ModelInvocationError().message == "ModelInvocationError"
    assert ValidationError("Missing question").message == "Missing question"
