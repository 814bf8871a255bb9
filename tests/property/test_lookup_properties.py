"""Property-based tests for configuration lookup and cache keys."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mwselenium.browser_factory import config_key
from mwselenium.environment import Environment
from mwselenium.log import LogConfig, LoggerFactory

RESERVED = {"set", "clear", "dict", "to_dict", "get", "has", "keys", "values", "items"}

valid_key = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12).filter(
    lambda s: s.isidentifier() and not s.startswith("_") and s not in RESERVED
)
alt_id = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=1, max_size=4)
present = st.one_of(st.integers(), st.text(min_size=1, max_size=20), st.booleans())
leaf = st.one_of(st.integers(), st.text(max_size=10), st.booleans(), st.none())
nested = st.recursive(
    leaf,
    lambda children: st.one_of(
        st.lists(children, max_size=3), st.dictionaries(valid_key, children, max_size=3)
    ),
    max_leaves=8,
)


def make_env(config):
    lg = LoggerFactory.create("/property", LogConfig.from_params(False))
    return Environment(config, lg=lg)


@pytest.mark.property
@pytest.mark.unit
class TestLookupProperties:
    """Property-based tests for Environment.lookup()."""

    @given(key=valid_key, id=alt_id, base=present, alternative=present)
    def test_alternative_selects_suffixed_key(self, key, id, base, alternative):
        env = make_env({key: base, f"{key}_{id}": alternative})

        assert env.lookup(key) == base
        assert env.lookup(key, id=id) == alternative
        with env.with_alternative(key, id):
            assert env.lookup(key) == alternative
        assert env.lookup(key) == base

    @given(key=valid_key, value=st.sampled_from([None, ""]), default=present)
    def test_empty_values_fall_back_to_default(self, key, value, default):
        env = make_env({key: value})
        assert env.lookup(key, default=default) == default


@pytest.mark.property
@pytest.mark.unit
class TestConfigKeyProperties:
    """Property-based tests for config_key()."""

    @given(config=st.dictionaries(valid_key, nested, max_size=5))
    def test_key_is_hashable_and_order_independent(self, config):
        reordered = dict(reversed(list(config.items())))

        assert hash(config_key(config)) == hash(config_key(reordered))
        assert config_key(config) == config_key(reordered)
