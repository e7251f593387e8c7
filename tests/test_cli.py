"""Tests for ramp_palette.__main__ — the ramp-palette command line."""

import json
from pathlib import Path

import pytest
from ramp_palette.__main__ import main
from ramp_palette.core.env import ENV_FORMAT
from ramp_palette.formats.zpl import ZPL_FOOTER, ZPL_HEADER


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A cwd with a .git boundary so no outside .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_FORMAT, raising=False)
    return tmp_path


class TestNew:
    def test_writes_default_format(self, workdir: Path) -> None:
        out = workdir / 'sky.json'
        main(['new', str(out), '--name', 'Sky', '--color', '#ff0000', '--color', '00ff00'])
        doc = json.loads(out.read_text())
        assert doc['name'] == 'Sky'
        assert [s['color'] for s in doc['slots']] == ['#ff0000', '#00ff00']

    def test_writes_zpl(self, workdir: Path) -> None:
        out = workdir / 'dungeon.zpl'
        main(['new', str(out), '--name', 'Dungeon'])
        assert out.read_bytes() == ZPL_HEADER + ZPL_FOOTER

    def test_format_from_env(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_FORMAT, 'default')
        out = workdir / 'palette.bin'
        main(['new', str(out), '--name', 'Env'])
        assert json.loads(out.read_text())['format'] == 'ramp-palette'

    def test_bad_color_exits(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['new', str(workdir / 'x.json'), '--name', 'X', '--color', 'nothex'])
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err

    def test_unknown_format_exits(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['new', str(workdir / 'x.json'), '--name', 'X', '--format', 'nope'])
        assert 'Unknown format: nope' in capsys.readouterr().err


class TestShow:
    def test_text(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = workdir / 'sky.json'
        main(['new', str(path), '--name', 'Sky', '--color', '#7dc7ff'])
        capsys.readouterr()
        main(['show', str(path)])
        out = capsys.readouterr().out
        assert 'RampPalette 1.0.0 Sky' in out
        assert '00:00:00  7DC7FF' in out

    def test_json(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = workdir / 'sky.json'
        main(['new', str(path), '--name', 'Sky', '--color', '#7dc7ff'])
        capsys.readouterr()
        main(['show', str(path), '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['slots'][0]['color'] == '#7dc7ff'

    def test_zpl_read_is_hard_failure(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = workdir / 'dungeon.zpl'
        main(['new', str(path), '--name', 'Dungeon'])
        with pytest.raises(SystemExit) as exc:
            main(['show', str(path)])
        assert exc.value.code == 1
        assert 'not supported' in capsys.readouterr().err

    def test_missing_file(self, workdir: Path) -> None:
        with pytest.raises(SystemExit):
            main(['show', str(workdir / 'missing.json')])


class TestSwatch:
    def test_renders_png(self, workdir: Path) -> None:
        path = workdir / 'sky.json'
        png = workdir / 'sky.png'
        main(['new', str(path), '--name', 'Sky', '--color', '#7dc7ff'])
        main(['swatch', str(path), str(png), '--cell', '1'])
        assert png.read_bytes()[:4] == b'\x89PNG'


class TestListing:
    def test_formats(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['formats'])
        out = capsys.readouterr().out
        assert 'zpl' in out
        assert 'default' in out

    def test_help_format(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'zpl'])
        assert 'ZPL palette format' in capsys.readouterr().out

    def test_no_command(self, workdir: Path) -> None:
        with pytest.raises(SystemExit):
            main([])


class TestPackage:
    def test_version_matches_project(self) -> None:
        import ramp_palette

        pyproject = Path(__file__).parent.parent / 'pyproject.toml'
        assert f'version = "{ramp_palette.__version__}"' in pyproject.read_text()
