import pytest

from quadstore.core.settings import DEFAULT_BOUNDARY, Settings, load_settings


def test_defaults_without_environment():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.db_path == "./data/db"
    assert settings.capacity == 4
    assert settings.boundary == DEFAULT_BOUNDARY
    assert settings.debug is False


def test_values_from_environment():
    settings = load_settings(
        {
            "QUADSTORE_DB_PATH": "/tmp/q",
            "QUADSTORE_CAPACITY": "8",
            "QUADSTORE_BOUNDARY": "50, 50, 50, 50",
            "QUADSTORE_MAX_DEPTH": "12",
            "QUADSTORE_DEBUG": "yes",
        }
    )

    assert settings == Settings(db_path="/tmp/q", capacity=8, boundary=(50.0, 50.0, 50.0, 50.0), max_depth=12, debug=True)


def test_overrides_win_and_none_is_ignored():
    settings = load_settings({"QUADSTORE_CAPACITY": "8"}, capacity=2, db_path=None)

    assert settings.capacity == 2
    assert settings.db_path == "./data/db"


@pytest.mark.parametrize(
    "env",
    [
        {"QUADSTORE_CAPACITY": "lots"},
        {"QUADSTORE_CAPACITY": "0"},
        {"QUADSTORE_BOUNDARY": "1,2,3"},
        {"QUADSTORE_BOUNDARY": "a,b,c,d"},
        {"QUADSTORE_BOUNDARY": "0,0,-1,1"},
        {"QUADSTORE_MAX_DEPTH": "0"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        load_settings(env)
