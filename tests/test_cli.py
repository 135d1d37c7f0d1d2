# tests/test_cli.py
from __future__ import annotations

from dataclasses import replace

import pytest

import make_uniform_palette
from uniform_palette.export import parse_header, read_act


def test_run_writes_outputs(tmp_path, capsys):
    base = tmp_path / "uniform"
    make_uniform_palette.main([str(base), "--quiet"])

    out = capsys.readouterr().out
    assert "Uniform palette generator" in out
    assert out.rstrip().endswith("Done!")

    data = (tmp_path / "uniform.act").read_bytes()
    assert len(data) == 768
    text = (tmp_path / "uniform.h").read_text(encoding="ascii")
    assert parse_header(text) == data


def test_verbose_lists_gamma_and_palette(tmp_path, capsys):
    make_uniform_palette.main([str(tmp_path / "v")])
    out = capsys.readouterr().out
    assert "gamma #0     0   0   0" in out
    assert "gamma #255 255 255 255" in out
    assert out.count("gamma #") == 256
    assert "=== palette ===" in out
    assert out.count("0x") == 768


def test_runs_are_byte_identical(tmp_path):
    make_uniform_palette.main([str(tmp_path / "a"), "--quiet"])
    make_uniform_palette.main([str(tmp_path / "b"), "--quiet"])
    assert (tmp_path / "a.act").read_bytes() == (tmp_path / "b.act").read_bytes()
    assert (tmp_path / "a.h").read_bytes() == (tmp_path / "b.h").read_bytes()


@pytest.mark.parametrize("argv", [[], ["one", "two"]])
def test_usage_error_exits_1(tmp_path, monkeypatch, argv):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        make_uniform_palette.main(argv)
    assert excinfo.value.code == 1
    assert list(tmp_path.iterdir()) == []


def test_bad_array_name_exits_1(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        make_uniform_palette.main([str(tmp_path / "p"), "--array-name", "1bad"])
    assert excinfo.value.code == 1


def test_unwritable_output_exits_1(tmp_path, capsys):
    base = tmp_path / "nowhere" / "pal"
    with pytest.raises(SystemExit) as excinfo:
        make_uniform_palette.main([str(base), "--quiet"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "[error]" in err
    assert "pal.act" in err


def test_overflow_aborts_before_writing(tmp_path, monkeypatch, capsys):
    real_build = make_uniform_palette.build_palette

    def perturbed(gamma, config):
        return real_build(gamma, replace(config, interpolation=0.5))

    monkeypatch.setattr(make_uniform_palette, "build_palette", perturbed)
    with pytest.raises(SystemExit) as excinfo:
        make_uniform_palette.main([str(tmp_path / "pal"), "--quiet"])
    assert excinfo.value.code == 1
    assert "color overflow" in capsys.readouterr().err
    assert not (tmp_path / "pal.act").exists()
    assert not (tmp_path / "pal.h").exists()


def test_pure_white_flag(tmp_path):
    make_uniform_palette.main([str(tmp_path / "w"), "--quiet", "--pure-white"])
    assert read_act(tmp_path / "w.act")[-1].tolist() == [255, 255, 255]


def test_custom_array_name(tmp_path):
    make_uniform_palette.main([str(tmp_path / "n"), "--quiet", "--array-name", "pal8"])
    text = (tmp_path / "n.h").read_text(encoding="ascii")
    assert text.startswith("const unsigned char pal8[] =\n")
