# Licensed under the GPLv3 - see LICENSE
import pytest
import entrypoints

from ... import constants
from ...base.symbols import SymbolTable
from ..linux import ERRNO
from ..streams import STREAM_TYPES


class TestBuiltinTables:
    def test_loaded_on_demand(self):
        assert 'STREAM_TYPES' in constants.SYMBOL_TABLES
        assert 'WIN32_ERRORS' in dir(constants)
        assert constants.STREAM_TYPES is STREAM_TYPES
        assert 'STREAM_TYPES' in constants.__dict__

    def test_reload_after_delete(self):
        assert isinstance(constants.ERRNO, SymbolTable)
        del constants.ERRNO
        assert 'ERRNO' not in constants.__dict__
        assert 'ERRNO' in constants.SYMBOL_TABLES
        assert constants.ERRNO is ERRNO

    def test_entries_are_entry_points(self):
        dir(constants)
        assert isinstance(constants._entries['STREAM_TYPES'],
                          entrypoints.EntryPoint)

    def test_missing(self):
        with pytest.raises(AttributeError):
            constants.NO_SUCH_TABLE
        with pytest.raises(AttributeError):
            constants._private


class TestExtensionTables:
    def setup_method(self):
        self.extra = {
            'EXTRA_ERRNO': entrypoints.EntryPoint(
                'EXTRA_ERRNO', 'mdmp.constants.linux', 'ERRNO'),
            'BROKEN_TABLE': entrypoints.EntryPoint(
                'BROKEN_TABLE', 'mdmp.no_such_module', 'TABLE')}

    def teardown_method(self):
        for name in self.extra:
            constants._entries.pop(name, None)
            constants._bad_entries.discard(name)
            constants.__dict__.pop(name, None)
            if name in constants.SYMBOL_TABLES:
                constants.SYMBOL_TABLES.remove(name)

    def test_extension(self, monkeypatch):
        monkeypatch.setattr(entrypoints, 'get_group_named',
                            lambda group: dict(self.extra))
        assert constants.EXTRA_ERRNO is ERRNO
        assert 'EXTRA_ERRNO' in constants.SYMBOL_TABLES

    def test_bad_entry_dropped(self, monkeypatch):
        monkeypatch.setattr(entrypoints, 'get_group_named',
                            lambda group: dict(self.extra))
        with pytest.raises(AttributeError, match='not loadable'):
            constants.BROKEN_TABLE
        assert 'BROKEN_TABLE' in constants._bad_entries
        assert 'BROKEN_TABLE' not in constants.SYMBOL_TABLES
        assert 'BROKEN_TABLE' not in dir(constants)
        # Not retried.
        with pytest.raises(AttributeError):
            constants.BROKEN_TABLE
