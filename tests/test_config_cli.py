# tests/test_config_cli.py
import pytest
from typer.testing import CliRunner

from baas.cli import app as cli_app
from baas.core.config import Settings, get_settings

runner = CliRunner()


@pytest.fixture()
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("DATABASE_URL", "PORT", "APP_MODE", "LOG_DIR"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(clean_env):
    s = Settings()
    assert s.DATABASE_URL is None
    assert s.PORT == 8080
    assert s.APP_MODE == "debug"
    assert s.API_PREFIX == "/baas"
    assert not s.is_release


def test_env_overrides(clean_env):
    clean_env.setenv("PORT", "9090")
    clean_env.setenv("APP_MODE", "release")
    s = Settings()
    assert s.PORT == 9090
    assert s.is_release


def test_postgres_scheme_is_normalized():
    s = Settings(_env_file=None, DATABASE_URL="postgres://u:p@db:5432/baas")
    assert s.DATABASE_URL == "postgresql://u:p@db:5432/baas"


def test_blank_database_url_counts_as_missing():
    assert Settings(_env_file=None, DATABASE_URL="  ").DATABASE_URL is None


def test_dotenv_file_is_read(clean_env, tmp_path):
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///./from_env.db\n", encoding="utf-8")
    assert Settings().DATABASE_URL == "sqlite:///./from_env.db"


def test_serve_exits_without_database_url(clean_env):
    result = runner.invoke(cli_app, ["serve"])
    assert result.exit_code == 1


def test_init_db_creates_tables(clean_env, tmp_path):
    db_file = tmp_path / "cli.db"
    clean_env.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    result = runner.invoke(cli_app, ["init-db"])
    assert result.exit_code == 0, result.output
    assert "Tables created" in result.output
    assert db_file.exists()


def test_init_db_exits_without_database_url(clean_env):
    result = runner.invoke(cli_app, ["init-db"])
    assert result.exit_code == 1
