"""Tests for versioning exceptions."""

import pytest

from api_version_client.versioning.exceptions import (
    ApiVersionError,
    ApiVersionMisconfigurationError,
    InserterConfigurationError,
    PathSegmentOutOfRangeError,
    VersionInsertionError,
)


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(InserterConfigurationError, ApiVersionError)
    assert issubclass(InserterConfigurationError, ValueError)
    assert issubclass(VersionInsertionError, ApiVersionError)
    assert issubclass(PathSegmentOutOfRangeError, VersionInsertionError)
    assert issubclass(ApiVersionMisconfigurationError, ApiVersionError)

    # Misconfiguration is reported separately from path shape problems
    assert not issubclass(ApiVersionMisconfigurationError, VersionInsertionError)


@pytest.mark.unit
def test_path_segment_out_of_range_attributes():
    error = PathSegmentOutOfRangeError("/path", 2)

    assert str(error) == "Cannot insert version into '/path' at path segment index 2"
    assert error.path == "/path"
    assert error.index == 2


@pytest.mark.unit
def test_misconfiguration_error_keeps_version():
    error = ApiVersionMisconfigurationError("No ApiVersionInserter configured", version=1.2)

    assert str(error) == "No ApiVersionInserter configured"
    assert error.version == 1.2


@pytest.mark.unit
def test_catch_all_versioning_errors():
    with pytest.raises(ApiVersionError):
        raise PathSegmentOutOfRangeError("/", 1)
