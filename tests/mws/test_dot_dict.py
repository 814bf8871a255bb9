"""
Tests for DotDict.

Tests key functionality including:
- Attribute and item access
- Nested conversion of dicts and lists
- Dotted path lookups
- Reserved keys and private attributes
"""

import pytest

from mwselenium.dot_dict import DotDict, DotDictPathNotFoundError


@pytest.mark.unit
class TestAccess:
    """Test basic access."""

    def test_attribute_and_item_access(self):
        d = DotDict(browser="firefox")

        assert d.browser == "firefox"
        assert d["browser"] == "firefox"

    def test_missing_item_is_none(self):
        assert DotDict()["missing"] is None

    def test_missing_attribute_raises(self):
        with pytest.raises(AttributeError):
            DotDict().missing

    def test_setitem_replaces(self):
        d = DotDict(a=1)
        d["a"] = {"b": 2}

        assert d.a.b == 2

    def test_mapping_protocol(self):
        d = DotDict(a=1, b=2)

        assert list(d) == ["a", "b"]
        assert list(d.keys()) == ["a", "b"]
        assert list(d.values()) == [1, 2]
        assert dict(d.items()) == {"a": 1, "b": 2}
        assert len(d) == 2
        assert "a" in d
        assert "c" not in d

    def test_non_string_key_is_stringified(self):
        d = DotDict()
        d.set(**{"1": "one"})
        d._set_item(2, "two")

        assert d["2"] == "two"

    @pytest.mark.parametrize("key", ["set", "get", "has", "dict", "to_dict", "clear"])
    def test_reserved_keys_raise(self, key):
        with pytest.raises(ValueError, match="reserved"):
            DotDict(**{key: 1})

    def test_private_attributes_are_not_keys(self):
        d = DotDict(a=1)
        d._state = "internal"

        assert list(d) == ["a"]
        assert "_state" not in d
        assert d["_state"] is None

    def test_clear(self):
        d = DotDict(a=1, b={"c": 2})
        d._state = "kept"
        d.clear()

        assert len(d) == 0
        assert d._state == "kept"


@pytest.mark.unit
class TestNested:
    """Test nested structures."""

    def test_nested_dict_becomes_dotdict(self):
        d = DotDict(logging={"level": "debug"})

        assert isinstance(d.logging, DotDict)
        assert d.logging.level == "debug"

    def test_dicts_in_lists_become_dotdicts(self):
        d = DotDict(servers=[{"host": "a"}, "b"])

        assert d.servers[0].host == "a"
        assert d.servers[1] == "b"

    def test_to_dict_is_recursive(self):
        data = {"a": {"b": {"c": 1}}, "l": [{"x": 1}, 2]}
        assert DotDict(**data).to_dict() == data

    def test_dict_converts_nested_dotdicts(self):
        assert DotDict(a={"b": 1}).dict() == {"a": {"b": 1}}

    def test_str_and_repr(self):
        d = DotDict(a=1)

        assert str(d) == "{'a': 1}"
        assert repr(d) == "DotDict({'a': 1})"


@pytest.mark.unit
class TestPaths:
    """Test has() and get() with dotted paths."""

    @pytest.fixture
    def d(self):
        return DotDict(logging={"level": "debug", "colors": False}, browser="firefox")

    def test_has(self, d):
        assert d.has("browser")
        assert d.has("logging.level")
        assert not d.has("logging.missing")
        assert not d.has("browser.level")
        assert not d.has("")

    def test_get(self, d):
        assert d.get("logging.level") == "debug"
        assert d.get("logging.colors") is False
        assert d.get("logging.missing") is None
        assert d.get("logging.missing", "info") == "info"

    def test_path_not_found_error(self, d):
        error = DotDictPathNotFoundError(d, "a.b")

        assert isinstance(error, KeyError)
        assert str(error) == "path 'a.b' not found"
        assert error.obj is d
