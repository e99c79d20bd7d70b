# test_registry.py

import pytest

from kolor.errors import DuplicateNameError, DuplicateValueError, RegistryTypeError
from kolor.style.registry import NamedRegistry, RegistryEntry
from kolor.style.definitions import (
    Foreground, Background, Style, Theme, ThemeSpec, colors, styles,
)


class TestNamedRegistry:
    """Name/value uniqueness, typing and removal."""

    def setup_method(self):
        self.levels = NamedRegistry('Level', int)
        self.levels.register('low', 1)
        self.levels.register('high', 2)

    def test_lookup_by_name_and_attribute(self):
        assert self.levels['low'].value == 1
        assert self.levels.get('high').value == 2
        assert self.levels.high is self.levels['high']

    def test_missing_name_is_absent(self):
        assert self.levels.get('medium') is None
        with pytest.raises(AttributeError):
            self.levels.medium

    def test_value_to_name(self):
        assert self.levels.name_for(2) == 'high'
        assert self.levels.name_for(99) == 'unknown'
        assert self.levels['low'].name == 'low'
        assert str(self.levels['low']) == 'low'

    def test_keys_keep_insertion_order(self):
        self.levels.register('mid', 5)
        assert self.levels.keys() == ['low', 'high', 'mid']
        assert self.levels.values() == [1, 2, 5]
        assert list(self.levels) == ['low', 'high', 'mid']
        assert len(self.levels) == 3

    def test_duplicate_value_names_existing_owner(self):
        with pytest.raises(DuplicateValueError) as exc:
            self.levels.register('other', 1)
        assert exc.value.existing == 'low'
        assert 'already assigned to low' in str(exc.value)
        assert 'other' not in self.levels

    def test_duplicate_name_reports_existing_value(self):
        with pytest.raises(DuplicateNameError) as exc:
            self.levels.register('low', 7)
        assert exc.value.existing_value == 1
        assert self.levels['low'].value == 1
        assert self.levels.name_for(7) == 'unknown'

    def test_value_checked_before_name(self):
        with pytest.raises(DuplicateValueError):
            self.levels.register('low', 1)

    def test_type_mismatch(self):
        with pytest.raises(RegistryTypeError) as exc:
            self.levels.register('bad', 'x')
        assert isinstance(exc.value, TypeError)
        assert 'expected int, got str' in str(exc.value)

    def test_declare_type_applies_to_later_entries(self):
        untyped = NamedRegistry('Loose')
        untyped.register('a', 'anything')
        untyped.declare_type(int)
        with pytest.raises(RegistryTypeError):
            untyped.register('b', 'text')
        untyped.register('c', 3)
        assert untyped.value_type is int

    def test_remove_deletes_both_directions_and_accessor(self):
        removed = self.levels.remove('low')
        assert removed.value == 1
        assert 'low' not in self.levels
        assert self.levels.name_for(1) == 'unknown'
        with pytest.raises(AttributeError):
            self.levels.low
        # both the name and the value are free again
        self.levels.register('low', 1)

    def test_remove_missing_returns_none(self):
        assert self.levels.remove('nothing') is None

    def test_entry_equality_and_hash(self):
        other = NamedRegistry('Other', int)
        other.register('low', 1)
        assert self.levels['low'] == RegistryEntry(self.levels, 1)
        assert self.levels['low'] != other['low']
        assert hash(self.levels['low']) == hash(1)
        assert repr(self.levels['low']) == '<Level low:1>'


class TestCatalogs:
    """Built-in catalogs seeded at import."""

    def test_foreground_codes(self):
        assert Foreground.keys() == [
            'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'
        ]
        assert Foreground.values() == list(range(30, 38))

    def test_background_codes(self):
        assert Background.values() == list(range(40, 48))
        assert Background.red.value == 41

    def test_style_codes(self):
        assert {n: Style[n].value for n in Style.keys()} == {
            'clear': 0, 'bold': 1, 'underline': 4, 'reversed': 7
        }
        assert styles() == ['bold', 'underline', 'reversed']

    def test_colors_sorted(self):
        assert colors() == sorted(Foreground.keys())

    def test_builtin_themes(self):
        assert Theme.keys()[:5] == ['success', 'error', 'warning', 'info', 'debug']
        assert Theme.error.value == ThemeSpec('white', 'red', ('bold',))
        assert Theme.info.value == ThemeSpec('cyan', None, ())

    def test_catalogs_reject_reseeding(self):
        with pytest.raises(DuplicateValueError):
            Foreground.register('crimson', 31)
        with pytest.raises(DuplicateNameError):
            Style.register('bold', 22)
        with pytest.raises(RegistryTypeError):
            Theme.register('plain', {'foreground': 'red'})
