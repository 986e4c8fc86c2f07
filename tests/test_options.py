import pytest

from tabstrip.options import TabstripOptions


def test_from_mapping_normalizes_exclusions() -> None:
    options = TabstripOptions.from_mapping(
        {"exclude_ft": ["qf", " help ", ""], "exclude_name": "package.json"}
    )

    assert options.exclude_ft == frozenset({"qf", "help"})
    assert options.exclude_name == frozenset({"package.json"})


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="clickable"):
        TabstripOptions.from_mapping({"clickable": True})


def test_negative_maximum_length_rejected() -> None:
    with pytest.raises(ValueError):
        TabstripOptions(maximum_length=-1)


def test_from_env_reads_prefixed_variables() -> None:
    options = TabstripOptions.from_env(
        {
            "TABSTRIP_EXCLUDE_FT": "qf,help",
            "TABSTRIP_NO_NAME_TITLE": "[No Name]",
            "TABSTRIP_MAXIMUM_LENGTH": "12",
            "TABSTRIP_INSERT_AT_START": "yes",
        }
    )

    assert options.exclude_ft == frozenset({"qf", "help"})
    assert options.no_name_title == "[No Name]"
    assert options.maximum_length == 12
    assert options.insert_at_start is True


def test_from_env_defaults() -> None:
    assert TabstripOptions.from_env({}) == TabstripOptions()
