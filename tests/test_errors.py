import pytest

from ftcontainers.errors import (
    ContainerError,
    ContainerOverflowError,
    ContainerUnderflowError,
    RangeError,
    throw_range_error,
)


def test_throw_range_error_raises_range_error_with_message():
    with pytest.raises(RangeError, match="vector::range_check") as info:
        throw_range_error("vector::range_check")
    assert str(info.value) == "vector::range_check"
    assert info.value.message == "vector::range_check"


def test_range_error_is_caught_as_container_error():
    with pytest.raises(ContainerError) as info:
        throw_range_error("out of range")
    assert info.value.message == "out of range"


def test_container_errors_are_caught_as_runtime_error():
    with pytest.raises(RuntimeError) as info:
        throw_range_error("boom")
    assert info.value.message == "boom"
    assert str(info.value) == "boom"


@pytest.mark.parametrize("cls", [ContainerOverflowError, ContainerUnderflowError])
def test_overflow_and_underflow_carry_message(cls):
    with pytest.raises(ContainerError) as info:
        raise cls("vector")
    assert info.value.message == "vector"
    assert type(info.value) is cls


def test_range_error_not_caught_as_overflow():
    with pytest.raises(RangeError) as info:
        try:
            throw_range_error("range")
        except ContainerOverflowError:
            pytest.fail("range error must not match overflow")
    assert str(info.value) == "range"