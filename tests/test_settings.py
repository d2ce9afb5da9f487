"""Unit tests for settings persistence."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from agichat.errors import SettingsError, StorageError
from agichat.session import (
    DEFAULT_SETTINGS,
    SETTINGS_KEY,
    AppSettings,
    ResponseStyle,
    SettingsStore,
)
from agichat.storage import KeyValueStore, create_kv_store


class BrokenStore(KeyValueStore):
    """Backend whose reads and/or writes always fail."""

    def __init__(self, fail_get: bool = False, fail_set: bool = False):
        self._inner = create_kv_store("memory")
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key):
        if self.fail_get:
            raise StorageError("disk unavailable")
        return self._inner.get(key)

    def set(self, key, value):
        if self.fail_set:
            raise StorageError("quota exceeded")
        self._inner.set(key, value)

    def delete(self, key):
        self._inner.delete(key)

    @property
    def backend_type(self):
        return "broken"


class TestLoad:
    """Tests for reading settings."""

    def test_missing_record_gives_defaults(self, settings_store):
        assert settings_store.current == DEFAULT_SETTINGS
        assert settings_store.current.temperature == 0.7
        assert settings_store.current.response_style == ResponseStyle.BALANCED

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            "",
            "[1, 2, 3]",
            "42",
            "null",
            '"text"',
            '{"temperature": "hot"}',
            '{"temperature": 5}',
            '{"max_output_tokens": 0}',
            '{"response_style": "verbose"}',
            pytest.param("[" * 100_000, id="deeply-nested-array"),
            pytest.param('{"a": ' * 100_000, id="deeply-nested-object"),
        ],
    )
    def test_malformed_record_gives_defaults(self, raw):
        """Scenario: a corrupted record never raises and yields the defaults."""
        storage = create_kv_store("memory", initial={SETTINGS_KEY: raw})

        store = SettingsStore(storage)

        assert store.current == DEFAULT_SETTINGS

    def test_unknown_fields_ignored(self):
        raw = json.dumps({"temperature": 0.2, "theme": "dark", "legacy": [1]})
        storage = create_kv_store("memory", initial={SETTINGS_KEY: raw})

        store = SettingsStore(storage)

        assert store.current.temperature == 0.2
        assert store.current.model == DEFAULT_SETTINGS.model

    def test_missing_fields_take_defaults(self):
        storage = create_kv_store("memory", initial={SETTINGS_KEY: '{"user_name": "Ada"}'})

        store = SettingsStore(storage)

        assert store.current.user_name == "Ada"
        assert store.current.temperature == DEFAULT_SETTINGS.temperature

    def test_unreadable_backend_gives_defaults(self):
        store = SettingsStore(BrokenStore(fail_get=True))
        assert store.current == DEFAULT_SETTINGS


class TestSave:
    """Tests for writing settings."""

    def test_round_trip(self, storage, settings_store):
        """Scenario: saved settings are current and survive a restart."""
        new = AppSettings(temperature=0.2, max_output_tokens=512, user_name="Ada")

        settings_store.save(new)

        assert settings_store.current == new
        assert SettingsStore(storage).current == new
        assert json.loads(storage.get(SETTINGS_KEY))["temperature"] == 0.2

    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "storage.json"
        new = AppSettings(model="gpt-4o", response_style=ResponseStyle.CONCISE)

        SettingsStore(create_kv_store("file", path=path)).save(new)
        reloaded = SettingsStore(create_kv_store("file", path=path))

        assert reloaded.current == new

    def test_failed_write_leaves_memory_unchanged(self):
        backend = BrokenStore(fail_set=True)
        store = SettingsStore(backend)

        with pytest.raises(SettingsError):
            store.save(AppSettings(temperature=1.5))

        assert store.current == DEFAULT_SETTINGS
        assert backend.get(SETTINGS_KEY) is None

    def test_update_validates_and_saves(self, storage, settings_store):
        settings_store.update(temperature=1.2, response_style="detailed")

        reloaded = SettingsStore(storage).current
        assert reloaded.temperature == 1.2
        assert reloaded.response_style == ResponseStyle.DETAILED

    def test_update_rejects_invalid_value(self, settings_store):
        with pytest.raises(ValidationError):
            settings_store.update(temperature=3.0)
        assert settings_store.current == DEFAULT_SETTINGS

    def test_reset_restores_defaults(self, storage, settings_store):
        settings_store.update(user_name="Ada")

        settings_store.reset()

        assert settings_store.current == DEFAULT_SETTINGS
        assert SettingsStore(storage).current == DEFAULT_SETTINGS


app_settings = st.builds(
    AppSettings,
    model=st.sampled_from(["", "gemini-2.5-flash", "gpt-4o-mini"]),
    temperature=st.floats(min_value=0.0, max_value=2.0, allow_nan=False),
    max_output_tokens=st.none() | st.integers(min_value=1, max_value=100_000),
    system_instruction=st.text(max_size=100),
    user_name=st.text(max_size=30),
    response_style=st.sampled_from(list(ResponseStyle)),
)


@given(settings=app_settings)
def test_save_then_load_returns_same_settings(settings):
    """Property test: any valid settings survive a save and a fresh load."""
    storage = create_kv_store("memory")

    SettingsStore(storage).save(settings)

    assert SettingsStore(storage).current == settings


def test_deeply_nested_file_gives_defaults(tmp_path):
    """A storage file nested too deeply to decode reads as defaults."""
    path = tmp_path / "storage.json"
    path.write_text("[" * 100_000)

    store = SettingsStore(create_kv_store("file", path=path))

    assert store.current == DEFAULT_SETTINGS
