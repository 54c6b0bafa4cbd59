import importlib
import logging

import pytest

import app.config as config
from app.schemas import Candidate
from app.services.compatibility import filter_compatible, labels_for_identity, orientation_labels


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    for key in ("GROUP_SIZE", "ORIENTATION_LABELS_JSON"):
        monkeypatch.delenv(key, raising=False)
    importlib.reload(config)


class _Requester:
    def __init__(self, gender_identity, interested_in):
        self.gender_identity = gender_identity
        self.interested_in = interested_in


@pytest.mark.parametrize("value", ["2", "6", "0"])
def test_group_size_out_of_range_fails_at_startup(reload_config, value):
    with pytest.raises(ValueError, match="GROUP_SIZE must be between 3 and 5"):
        reload_config(GROUP_SIZE=value)


def test_group_size_in_range_is_accepted(reload_config):
    assert reload_config(GROUP_SIZE="5").GROUP_SIZE == 5


@pytest.mark.parametrize(
    "raw",
    [
        '{"Woman": "Women"}',
        '["Women", "Men"]',
        '{"Woman": [1, 2]}',
        "{not json",
    ],
)
def test_malformed_orientation_labels_fall_back_to_defaults(reload_config, caplog, raw):
    with caplog.at_level(logging.WARNING, logger="app.config"):
        loaded = reload_config(ORIENTATION_LABELS_JSON=raw)
    assert loaded.ORIENTATION_LABELS is None
    assert "Falling back to in-code defaults" in caplog.text
    assert labels_for_identity("Woman") == {"Women", "All genders"}


def test_orientation_labels_override_from_env(reload_config):
    reload_config(ORIENTATION_LABELS_JSON='{"Woman": ["Women"], "Man": ["Men"]}')
    assert orientation_labels() == {"Woman": ["Women"], "Man": ["Men"]}
    assert labels_for_identity("Woman") == {"Women"}

    pool = [
        Candidate(id="a", name="A", age=30, neighborhood="Astoria", gender_identity="Man", interested_in=["All genders"]),
        Candidate(id="b", name="B", age=30, neighborhood="Astoria", gender_identity="Man", interested_in=["Women"]),
    ]
    assert [c.id for c in filter_compatible(_Requester("Woman", ["Men"]), pool)] == ["b"]
