"""Tests for ramp_palette.core.env — .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from ramp_palette.core.env import ENV_FORMAT, ENV_LOG_LEVEL, _find_dotenv, _parse_dotenv, load_env, settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export RAMP_PALETTE_FORMAT=default\n')
        assert _parse_dotenv(f) == {'RAMP_PALETTE_FORMAT': 'default'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').mkdir()
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').write_text('gitdir: ../somewhere\n')
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_RAMP_KEY', raising=False)
        (tmp_path / '.env').write_text('TEST_RAMP_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('TEST_RAMP_KEY') == 'secret'
        os.environ.pop('TEST_RAMP_KEY', None)

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_RAMP_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_RAMP_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_RAMP_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_RAMP_KEY3', raising=False)
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_RAMP_KEY3=custom\n')
        load_env(env_file=str(dotenv))
        assert os.environ.get('TEST_RAMP_KEY3') == 'custom'
        os.environ.pop('TEST_RAMP_KEY3', None)

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_FORMAT, raising=False)
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        assert settings() == {'format': 'zpl', 'log_level': 'WARNING'}

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_FORMAT, 'default')
        monkeypatch.setenv(ENV_LOG_LEVEL, 'debug')
        assert settings() == {'format': 'default', 'log_level': 'DEBUG'}
