"""Unit tests for settings.mapping_store module."""

from src.settings.mapping_store import MappingStore
from src.settings.settings_repository import SettingsRepository


def make_store(tmp_path):
    settings_path = str(tmp_path / "settings.yaml")
    return MappingStore(SettingsRepository.load(settings_path)), settings_path


class TestMappingStore:
    """Test cases for MappingStore."""

    def test_get_absent_returns_none(self, tmp_path):
        store, _ = make_store(tmp_path)

        assert store.get("missing") is None

    def test_set_then_get_round_trip(self, tmp_path):
        """get() returns exactly what set() stored."""
        store, _ = make_store(tmp_path)

        store.set("abc", "12345")

        assert store.get("abc") == "12345"

    def test_set_persists_to_settings_file(self, tmp_path):
        """A set() survives reloading the settings file."""
        store, settings_path = make_store(tmp_path)

        store.set("abc", "12345")

        reloaded = MappingStore(SettingsRepository.load(settings_path))
        assert reloaded.get("abc") == "12345"

    def test_set_overwrites_previous_value(self, tmp_path):
        """There is at most one page ID per uniqueId."""
        store, _ = make_store(tmp_path)
        store.set("abc", "111")

        store.set("abc", "222")

        assert store.get("abc") == "222"
        assert list(store.repository.settings.mapping) == ["abc"]

    def test_register_creates_empty_slot(self, tmp_path):
        """register() stores an empty value for a new uniqueId."""
        store, settings_path = make_store(tmp_path)

        store.register("abc")

        assert store.get("abc") == ""
        assert not store.is_connected("abc")
        assert MappingStore(SettingsRepository.load(settings_path)).get("abc") == ""

    def test_register_keeps_existing_value(self, tmp_path):
        """register() never clears an existing connection."""
        store, _ = make_store(tmp_path)
        store.set("abc", "12345")

        store.register("abc")

        assert store.get("abc") == "12345"
        assert store.is_connected("abc")
