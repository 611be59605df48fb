from sstest.errors import InvalidArgumentError, SSTestError


def test_sstest_error_is_runtime_error():
    err = SSTestError("broken state")
    assert err.message == "broken state"
    assert str(err) == "broken state"
    assert isinstance(err, RuntimeError)


def test_invalid_argument_is_value_error():
    err = InvalidArgumentError("bad value")
    assert err.message == "bad value"
    assert str(err) == "bad value"
    assert isinstance(err, ValueError)


def test_names_identify_the_class():
    assert SSTestError("a").name == "SSTestError"
    assert InvalidArgumentError("b").name == "InvalidArgumentError"


def test_errors_are_distinct():
    invalid = InvalidArgumentError("x")
    runtime = SSTestError("y")
    assert invalid.message == "x"
    assert not isinstance(invalid, SSTestError)
    assert not isinstance(runtime, InvalidArgumentError)


def test_default_message_is_empty():
    err = SSTestError()
    assert err.message == ""
    assert str(err) == ""