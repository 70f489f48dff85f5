from examcell.core.exceptions import AppError, AssignmentError, ConfigurationError, ResourceNotFoundError


def test_assignment_error_structure():
    err = AssignmentError(message="Test error", details={"foo": "bar"})
    assert err.status_code == 400
    assert err.message == "Test error"
    assert err.details == {"foo": "bar"}
    assert isinstance(err, AppError)

def test_app_error_defaults():
    err = AppError("Generic error")
    assert err.status_code == 500
    assert err.details == {}

def test_resource_not_found_message():
    err = ResourceNotFoundError("Classroom", "r9")
    assert err.status_code == 404
    assert str(err) == "Classroom with id r9 not found"

def test_configuration_error_is_server_side():
    assert ConfigurationError("bad ratio").status_code == 500
