"""Tests for the application scanner and configured application state."""

import pytest

from server_info.application import (
    ApplicationConstants,
    Module,
    Network,
    StaticApplicationState,
    Theme,
)
from server_info.config import ConfigError
from server_info.scanner.application import NETWORK_PAGE_SIZE, ApplicationScanner


class RecordingState(StaticApplicationState):
    """Static state that records network page requests."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.offsets = []

    def query_networks(self, number, offset=0):
        self.offsets.append((number, offset))
        return super().query_networks(number, offset)


def test_single_tenant_user_count(single_site_state):
    group = ApplicationScanner(single_site_state).scan()

    assert group.key == "application"
    assert group.fields["multisite"].value == "No"
    assert group.fields["user_count"].value == "7"
    assert "site_count" not in group.fields
    assert "network_count" not in group.fields


def test_multi_tenant_counts(multisite_state):
    group = ApplicationScanner(multisite_state).scan()

    assert group.fields["multisite"].value == "Yes"
    assert group.fields["user_count"].value == "12"
    assert group.fields["site_count"].value == "8"
    assert group.fields["network_count"].value == "2"


def test_network_enumeration_is_paginated():
    state = RecordingState(
        multisite=True,
        networks=[Network(id=i, site_count=1) for i in range(1, 251)],
    )

    group = ApplicationScanner(state).scan()

    assert group.fields["site_count"].value == "250"
    assert group.fields["network_count"].value == "250"
    assert state.offsets == [
        (NETWORK_PAGE_SIZE, 0),
        (NETWORK_PAGE_SIZE, 100),
        (NETWORK_PAGE_SIZE, 200),
    ]


def test_multisite_without_networks():
    group = ApplicationScanner(RecordingState(multisite=True)).scan()

    assert group.fields["site_count"].value == "0"
    assert group.fields["network_count"].value == "0"


def test_active_theme(single_site_state):
    group = ApplicationScanner(single_site_state).scan()
    assert group.fields["active_theme"].value == "Twenty Twenty-Four (twentytwentyfour)"


def test_modules_partitioned_by_activation(single_site_state):
    group = ApplicationScanner(single_site_state).scan()

    assert dict(group.fields["modules_active"].value) == {"Akismet": "By Automattic"}
    assert dict(group.fields["modules_inactive"].value) == {"Hello Dolly": ""}


def test_zero_modules_render_none():
    group = ApplicationScanner(StaticApplicationState()).scan()

    assert group.fields["modules_active"].value == "None"
    assert group.fields["modules_inactive"].value == "None"


def test_constants(single_site_state):
    group = ApplicationScanner(single_site_state).scan()

    assert group.fields["memory_limit"].value == "40M"
    assert group.fields["max_memory_limit"].value == "256M"
    assert group.fields["debug"].value == "Disabled"

    debug_state = StaticApplicationState(application_constants=ApplicationConstants(debug=True))
    assert ApplicationScanner(debug_state).scan().fields["debug"].value == "Enabled"


def test_failing_query_keeps_other_fields(single_site_state):
    class BrokenModules(StaticApplicationState):
        def modules(self):
            raise RuntimeError("registry unreadable")

    state = BrokenModules(users=3)
    group = ApplicationScanner(state).scan()

    assert "modules_active" not in group.fields
    assert group.fields["user_count"].value == "3"
    assert group.fields["debug"].value == "Disabled"


def test_field_order(single_site_state):
    group = ApplicationScanner(single_site_state).scan()
    assert list(group.fields) == [
        "multisite",
        "user_count",
        "active_theme",
        "modules_active",
        "modules_inactive",
        "memory_limit",
        "max_memory_limit",
        "debug",
    ]


def test_no_state_gives_empty_group():
    assert ApplicationScanner(None).scan().is_empty


def test_state_from_config():
    state = StaticApplicationState.from_config({
        "multisite": True,
        "user_count": 42,
        "networks": [{"id": 1, "site_count": 3}, {"id": 2, "site_count": 5}],
        "theme": {"name": "Astra", "stylesheet": "astra"},
        "modules": [
            {"path": "seo/seo.php", "name": "SEO", "author": "Yoast", "active": True},
            {"name": "Cache"},
        ],
        "memory_limit": "64M",
        "debug": True,
    })

    assert state.is_multisite()
    assert state.user_count() == 42
    assert state.query_networks(number=100).found == 2
    assert state.site_count(2) == 5
    assert state.site_count(99) == 0
    assert state.active_theme() == Theme(name="Astra", stylesheet="astra")
    assert state.modules() == [
        Module(path="seo/seo.php", name="SEO", author="Yoast", active=True),
        Module(path="Cache", name="Cache", author="", active=False),
    ]
    assert state.constants() == ApplicationConstants(memory_limit="64M", max_memory_limit="256M", debug=True)


@pytest.mark.parametrize("config, message", [
    ({"networks": [{"site_count": 3}]}, "no id"),
    ({"networks": [{"id": "main"}]}, "Invalid application.networks"),
    ({"networks": {"id": 1}}, "must be a list"),
    ({"modules": ["Akismet"]}, "must be mappings"),
    ({"theme": "astra"}, "theme must be a mapping"),
    ({"user_count": "many"}, "user_count"),
])
def test_state_from_bad_config(config, message):
    with pytest.raises(ConfigError, match=message):
        StaticApplicationState.from_config(config)
