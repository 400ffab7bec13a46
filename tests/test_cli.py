"""
Tests for the command-line entry point and the PNG sink
"""

import sys

import pytest

from identicon import main as cli
from identicon.services.identicon_service import generate
from identicon.services.image_service import ImageService


class TestImageService:
    """Test writing images to disk."""

    def test_save_image(self, tmp_path):
        path = ImageService().save_image(b"png-bytes", "pjw", tmp_path / "images")
        assert path == tmp_path / "images" / "pjw.png"
        assert path.read_bytes() == b"png-bytes"

    @pytest.mark.parametrize("seed", ["", ".", "..", "a/b", "a\\b"])
    def test_rejects_unsafe_seed(self, tmp_path, seed):
        with pytest.raises(ValueError):
            ImageService().save_image(b"x", seed, tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestMain:
    """Test the identicon CLI."""

    def test_writes_png(self, tmp_path, capsys):
        assert cli.main(["pjw", "--out-dir", str(tmp_path)]) == 0
        out = tmp_path / "pjw.png"
        assert out.read_bytes() == generate("pjw")
        assert str(out) in capsys.readouterr().out

    def test_out_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("IDENTICON_OUT_DIR", str(tmp_path / "env"))
        assert cli.main(["alice"]) == 0
        assert (tmp_path / "env" / "alice.png").exists()

    @pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts non-UTF-8 names")
    def test_non_utf8_argv_seed(self, tmp_path, capsys):
        """`identicon $'\\xff'` arrives as a surrogate-escaped str and hashes the raw byte."""
        assert cli.main(["\udcff", "--out-dir", str(tmp_path)]) == 0
        assert (tmp_path / "\udcff.png").read_bytes() == generate(b"\xff")
        assert "�.png" in capsys.readouterr().out

    def test_unencodable_seed_exits_with_error(self, tmp_path, capsys):
        assert cli.main(["\ud800", "--out-dir", str(tmp_path)]) == 1
        assert "Ошибка" in capsys.readouterr().err

    def test_unsafe_seed_exits_with_error(self, tmp_path, capsys):
        assert cli.main(["../escape", "--out-dir", str(tmp_path)]) == 1
        assert "Ошибка" in capsys.readouterr().err

    def test_no_seed_opens_window(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(cli, "run_gui", lambda seed, out_dir: calls.append((seed, out_dir)))
        assert cli.main(["--out-dir", str(tmp_path)]) == 0
        assert calls == [(None, tmp_path)]

    def test_show_opens_window_after_saving(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(cli, "run_gui", lambda seed, out_dir: calls.append(seed))
        assert cli.main(["pjw", "--show", "--out-dir", str(tmp_path)]) == 0
        assert (tmp_path / "pjw.png").exists()
        assert calls == ["pjw"]
