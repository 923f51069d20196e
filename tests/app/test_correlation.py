from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("corr-1")
    assert get_correlation_id() == "corr-1"

    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_one() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == len(generate_correlation_id())
    finally:
        reset_correlation_id(token)
