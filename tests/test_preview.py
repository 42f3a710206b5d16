"""Tests for term_fx.commands.preview — half-block image rendering."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from term_fx.__main__ import run
from term_fx.commands.preview import render_lines, render_plain
from term_fx.core.types import CapabilityTier

ESC = '\x1b'


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for var in ('TERM_FX_TIER', 'COLORTERM', 'NO_COLOR'):
        # setenv first so anything a .env load adds is undone afterwards
        monkeypatch.setenv(var, '')
        monkeypatch.delenv(var)


@pytest.fixture
def quad() -> np.ndarray:
    """2x2 pixels: red, blue on top; green, black below."""
    return np.array(
        [
            [[255, 0, 0], [0, 0, 255]],
            [[0, 255, 0], [0, 0, 0]],
        ]
    )


class TestRenderLines:
    def test_truecolor(self, quad):
        lines = render_lines(quad, CapabilityTier.TRUE_COLOR)
        assert lines == [f'{ESC}[38;2;255;0;0;48;2;0;255;0m▀{ESC}[38;2;0;0;255;48;2;0;0;0m▀{ESC}[0m']

    def test_ansi(self, quad):
        lines = render_lines(quad, CapabilityTier.ANSI_16)
        assert lines == [f'{ESC}[31;42m▀{ESC}[34;40m▀{ESC}[0m']

    def test_repeated_cells_share_one_sequence(self):
        pixels = np.zeros((2, 3, 3), dtype=int)
        lines = render_lines(pixels, CapabilityTier.INDEXED_256)
        assert lines == [f'{ESC}[38;5;16;48;5;16m▀▀▀{ESC}[0m']


class TestRenderPlain:
    def test_white_is_densest(self):
        pixels = np.full((2, 2, 3), 255)
        assert render_plain(pixels) == ['@@']

    def test_black_is_blank(self):
        pixels = np.zeros((4, 1, 3))
        assert render_plain(pixels) == [' ', ' ']


class TestPreviewCommand:
    def test_solid_image(self, tmp_path, capsys):
        path = tmp_path / 'red.png'
        Image.new('RGB', (4, 4), (255, 0, 0)).save(path)
        assert run(['preview', str(path), '--width', '4', '--tier', 'truecolor']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0] == f'{ESC}[38;2;255;0;0;48;2;255;0;0m▀▀▀▀{ESC}[0m'

    def test_width_caps_at_image_width(self, tmp_path, capsys):
        path = tmp_path / 'small.png'
        Image.new('RGB', (2, 2), (0, 0, 0)).save(path)
        assert run(['preview', str(path), '--width', '80', '--tier', '16']) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [f'{ESC}[30;40m▀▀{ESC}[0m']
        assert 'fallback to 16-color ANSI palette' in captured.err

    def test_no_color(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv('NO_COLOR', '1')
        path = tmp_path / 'white.png'
        Image.new('RGB', (3, 2), (255, 255, 255)).save(path)
        assert run(['preview', str(path), '--width', '3']) == 0
        assert capsys.readouterr().out == '@@@\n'

    def test_missing_image(self, tmp_path, capsys):
        assert run(['preview', str(tmp_path / 'nope.png')]) == 1
        assert 'image not found' in capsys.readouterr().err

    def test_unreadable_image(self, tmp_path, capsys):
        path = tmp_path / 'notes.png'
        path.write_text('not an image\n')
        assert run(['preview', str(path), '--tier', 'truecolor']) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'term-fx: cannot read image:' in captured.err
