import pytest

from itemid_browse.config.settings import (
    ROOT_DIR,
    build_parser_config,
    load_client_configuration,
    resolve_log_dir,
)
from itemid_browse.domain.models import ClientConfiguration, DaClientConfiguration
from itemid_browse.processing.shared.error_handling import ConfigurationError


def test_build_parser_config_base_shape():
    values = build_parser_config({"ITEMID_SEPARATOR_CHARS": "./"})

    assert values == {"separator_chars": "./"}


def test_build_parser_config_defaults_to_empty_separators():
    assert build_parser_config({}) == {"separator_chars": ""}


def test_build_parser_config_da_shape():
    values = build_parser_config({
        "ITEMID_SEPARATOR_CHARS": "",
        "ITEMID_GROUP_PREFIX": "G.",
        "ITEMID_ITEM_SEPARATOR": ".",
    })

    assert values == {"separator_chars": "", "group_prefix": "G.", "item_separator": "."}


def test_build_parser_config_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ITEMID_SEPARATOR_CHARS", ",")
    monkeypatch.delenv("ITEMID_GROUP_PREFIX", raising=False)
    monkeypatch.delenv("ITEMID_ITEM_SEPARATOR", raising=False)

    assert build_parser_config() == {"separator_chars": ","}


def test_load_base_configuration():
    configuration = load_client_configuration({"separator_chars": "/."})

    assert type(configuration) is ClientConfiguration
    assert configuration.separator_chars == "/."


def test_load_configuration_from_separator_list():
    configuration = load_client_configuration({"separator_chars": [",", "."]})

    assert configuration.separator_chars == ",."


@pytest.mark.parametrize("values", [
    {"group_prefix": "G."},
    {"item_separator": "."},
    {"separator_chars": "", "group_prefix": "G.", "item_separator": "."},
])
def test_load_da_configuration(values):
    configuration = load_client_configuration(values)

    assert isinstance(configuration, DaClientConfiguration)
    assert configuration.group_prefix == values.get("group_prefix", "")
    assert configuration.item_separator == values.get("item_separator", "")


@pytest.mark.parametrize("values", [
    {"separator_chars": 5},
    {"separator_chars": ["..", "/"]},
    {"group_prefix": None},
    {"separator_chars": ".", "unknown": True},
])
def test_invalid_configuration_raises(values):
    with pytest.raises(ConfigurationError) as excinfo:
        load_client_configuration(values)

    assert isinstance(excinfo.value, ValueError)
    assert "Invalid parser configuration" in str(excinfo.value)


def test_load_uses_parser_config_by_default(monkeypatch):
    monkeypatch.setattr(
        "itemid_browse.config.settings.PARSER_CONFIG",
        {"separator_chars": "|", "group_prefix": "#"},
    )

    configuration = load_client_configuration()

    assert configuration == DaClientConfiguration("|", group_prefix="#")


def test_root_dir_is_package_directory():
    assert (ROOT_DIR / "config" / "settings.py").is_file()


def test_resolve_log_dir_unset_means_console_only():
    assert resolve_log_dir(None) is None
    assert resolve_log_dir("") is None


def test_resolve_log_dir_relative_to_root_dir():
    assert resolve_log_dir("logs") == ROOT_DIR / "logs"


def test_resolve_log_dir_keeps_absolute_path(tmp_path):
    assert resolve_log_dir(str(tmp_path / "logs")) == tmp_path / "logs"
