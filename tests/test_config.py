"""
Tests for settings and command line overrides.
"""
import pytest
from pydantic import ValidationError

from maze_chase.config import Settings, get_settings
from maze_chase.gameplay.constants import MAZE_ROWS, MAZE_COLS, TICK_RATE_MS
from maze_chase.main import parse_args, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in ("ROWS", "COLS", "SEED", "TICK_RATE_MS", "LOG_LEVEL"):
        monkeypatch.delenv(f"MAZE_CHASE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        """Defaults come from the gameplay constants."""
        settings = Settings()
        assert settings.rows == MAZE_ROWS
        assert settings.cols == MAZE_COLS
        assert settings.tick_rate_ms == TICK_RATE_MS
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        """MAZE_CHASE_* variables override defaults."""
        monkeypatch.setenv("MAZE_CHASE_ROWS", "8")
        monkeypatch.setenv("MAZE_CHASE_SEED", "1234")
        monkeypatch.setenv("maze_chase_tick_rate_ms", "100")

        settings = Settings()
        assert settings.rows == 8
        assert settings.seed == 1234
        assert settings.tick_rate_ms == 100

    def test_dotenv_file(self, tmp_path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("MAZE_CHASE_COLS=21\n")
        assert Settings().cols == 21

    @pytest.mark.parametrize("field", ["rows", "cols", "tick_rate_ms", "bullet_lifetime"])
    def test_rejects_non_positive(self, field):
        """Dimensions, tick rate and lifetimes must be positive."""
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_carve_delay_may_be_zero(self):
        """A zero carve delay disables the animation."""
        assert Settings(carve_delay_ms=0).carve_delay_ms == 0

    def test_get_settings_cached(self):
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestCommandLine:
    """Tests for command line parsing."""

    def test_no_arguments(self):
        """With no flags the environment settings are used."""
        settings = load_settings(parse_args([]))
        assert settings.rows == MAZE_ROWS
        assert settings.seed is None

    def test_flags_override(self, monkeypatch):
        """Flags win over environment variables."""
        monkeypatch.setenv("MAZE_CHASE_ROWS", "8")
        settings = load_settings(parse_args(["--rows", "5", "--cols", "6", "--seed", "7"]))

        assert settings.rows == 5
        assert settings.cols == 6
        assert settings.seed == 7

    def test_env_used_when_flag_missing(self, monkeypatch):
        """Unset flags fall back to the environment."""
        monkeypatch.setenv("MAZE_CHASE_ROWS", "9")
        settings = load_settings(parse_args(["--cols", "4"]))

        assert settings.rows == 9
        assert settings.cols == 4

    def test_invalid_flag_value(self):
        """Out of range flags fail validation."""
        with pytest.raises(ValidationError):
            load_settings(parse_args(["--rows", "0"]))
