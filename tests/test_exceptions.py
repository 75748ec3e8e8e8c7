import pytest

from modgrab.exceptions import (
    APIError,
    APINotFoundError,
    APIRateLimitError,
    APIServerError,
    NoMatchingProjectsError,
    error_for_status,
)


def test_to_dict():
    error = NoMatchingProjectsError(
        "No projects matching Minecraft version 1.20.1 were found",
        context={"query": "sodium"},
    )
    assert error.to_dict() == {
        "error": True,
        "code": "E602",
        "message": "No projects matching Minecraft version 1.20.1 were found",
        "context": {"query": "sodium"},
        "type": "NoMatchingProjectsError",
    }
    assert str(error) == "[E602] No projects matching Minecraft version 1.20.1 were found"


@pytest.mark.parametrize(
    "status, expected, code",
    [
        (404, APINotFoundError, "E404"),
        (429, APIRateLimitError, "E429"),
        (502, APIServerError, "E500"),
        (400, APIError, "E400"),
    ],
)
def test_error_for_status(status, expected, code):
    error = error_for_status(status, "failed")
    assert type(error) is expected
    assert error.code == code
