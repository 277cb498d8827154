"""
Tests for declarative provider instantiation via CONFIGURATION_FROM.
"""

import os

import pytest

import configstore
from configstore.core.exceptions import ProviderFactoryError, ProviderError
from configstore.core.registry import register_provider_factory, get
from conftest import write_file, ITEMS_YAML


def test_unset_variable_is_noop(store, monkeypatch):
    monkeypatch.delenv("CONFIGURATION_FROM", raising=False)
    store.init_from_environment()
    assert store.provider_names() == []


def test_blank_variable_is_noop(store, monkeypatch):
    monkeypatch.setenv("CONFIGURATION_FROM", "  ")
    store.init_from_environment()
    assert store.provider_names() == []


def test_file_and_filelist(store, monkeypatch, tmp_path):
    single = write_file(str(tmp_path / "a.yaml"), ITEMS_YAML)
    listdir = tmp_path / "b"
    write_file(str(listdir / "one.yaml"), "- key: one\n  value: '1'\n")
    write_file(str(listdir / "two.yaml"), "- key: two\n  value: '2'\n")

    monkeypatch.setenv("CONFIGURATION_FROM", f"file:{single},filelist:{listdir}")
    store.init_from_environment()

    assert sorted(store.provider_names()) == sorted([
        f"file:{single}",
        f"file:{os.path.join(str(listdir), 'one.yaml')}",
        f"file:{os.path.join(str(listdir), 'two.yaml')}",
    ])
    assert [it.key for it in store.get_item_list()] == ["db_host", "db_port", "one", "two"]


def test_builtin_factories_target_the_initializing_store(store, monkeypatch, items_file):
    monkeypatch.setenv("CONFIGURATION_FROM", f"file:{items_file}")
    store.init_from_environment()

    assert f"file:{items_file}" in store.provider_names()
    assert f"file:{items_file}" not in get().provider_names()


def test_whitespace_is_trimmed(store, monkeypatch, items_file):
    monkeypatch.setenv("CONFIGURATION_FROM", f"  file : {items_file} ,")
    store.init_from_environment()
    assert store.provider_names() == [f"file:{items_file}"]


def test_argument_split_on_first_colon(store, monkeypatch):
    received = []
    register_provider_factory("test-first-colon", received.append)

    monkeypatch.setenv("CONFIGURATION_FROM", "test-first-colon:http://host:8080/cfg")
    store.init_from_environment()

    assert received == ["http://host:8080/cfg"]


def test_directive_without_colon_has_empty_argument(store, monkeypatch):
    received = []
    register_provider_factory("test-bare", received.append)

    monkeypatch.setenv("CONFIGURATION_FROM", "test-bare")
    store.init_from_environment()

    assert received == [""]


def test_unknown_factory_registers_failing_provider(store, monkeypatch):
    monkeypatch.setenv("CONFIGURATION_FROM", "consul:/app/config")
    store.init_from_environment()

    assert store.provider_names() == ["consul:/app/config"]
    with pytest.raises(ProviderFactoryError, match="failed to instantiate provider factory"):
        store.get_provider("consul:/app/config")()
    with pytest.raises(ProviderError):
        store.get_item_list()


def test_missing_file_does_not_abort_startup(store, monkeypatch, tmp_path, items_file):
    missing = str(tmp_path / "missing.yaml")
    monkeypatch.setenv("CONFIGURATION_FROM", f"file:{missing},file:{items_file}")
    store.init_from_environment()

    assert store.provider_names() == [f"file:{missing}", f"file:{items_file}"]
    with pytest.raises(FileNotFoundError):
        store.get_provider(f"file:{missing}")()


def test_custom_factory_using_module_api(store, monkeypatch):
    """Factories written against the module level API register into the initializing store."""
    def overrides(argument):
        key, _, value = argument.partition("=")
        configstore.in_memory(f"overrides:{key}").add(configstore.Item(key, value))

    register_provider_factory("test-overrides", overrides)
    monkeypatch.setenv("CONFIGURATION_FROM", "test-overrides:db_host=remote")
    store.init_from_environment()

    assert store.provider_names() == ["overrides:db_host"]
    assert store.get_item_list()[0].value == "remote"
    assert "overrides:db_host" not in get().provider_names()


def test_plain_tests_are_marked_unit(request):
    assert request.node.get_closest_marker("unit") is not None
    assert request.node.get_closest_marker("integration") is None


def test_module_api_passes_store_keywords(store, monkeypatch, items_file):
    """Module level loaders accept the same keywords as the Store methods."""
    pollers = []

    def refreshing(argument):
        pollers.append(configstore.file_refresh(argument, interval=3600))
        configstore.env_variable(configstore.with_priority(7), name="environ:refreshing")

    register_provider_factory("test-refreshing", refreshing)
    monkeypatch.setenv("CONFIGURATION_FROM", f"test-refreshing:{items_file}")
    store.init_from_environment()

    assert pollers[0].interval == 3600
    assert store.provider_names() == [f"file:{items_file}", "environ:refreshing"]
