import pytest
from pydantic import ValidationError

from hillshade.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SPACING",
        "AZIMUTH",
        "ALTITUDE",
        "LIGHT_DIRECTION",
        "EXAGGERATION",
        "VERBOSE",
    ):
        monkeypatch.delenv(f"HILLSHADE_{name}", raising=False)


def test_default_settings() -> None:
    # Act
    settings = Settings(_env_file=None)

    # Assert
    assert settings.spacing == 1.0
    assert settings.azimuth == 45.0
    assert settings.altitude == 45.0
    assert settings.light_direction == (0.0, 0.0, 0.0)
    assert settings.exaggeration == 1.0
    assert settings.verbose is False


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # Arrange
    monkeypatch.setenv("HILLSHADE_AZIMUTH", "315")
    monkeypatch.setenv("HILLSHADE_EXAGGERATION", "2.5")
    monkeypatch.setenv("HILLSHADE_LIGHT_DIRECTION", "[1, 1, 1]")
    monkeypatch.setenv("HILLSHADE_VERBOSE", "true")

    # Act
    settings = Settings(_env_file=None)

    # Assert
    assert settings.azimuth == 315.0
    assert settings.exaggeration == 2.5
    assert settings.light_direction == (1.0, 1.0, 1.0)
    assert settings.verbose is True


def test_settings_reject_non_positive_spacing(monkeypatch: pytest.MonkeyPatch) -> None:
    # Arrange
    monkeypatch.setenv("HILLSHADE_SPACING", "0")

    # Act and assert
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    # Act and assert
    assert get_settings() is get_settings()
