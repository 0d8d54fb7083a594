import logging

import pytest

from ppmrw.main import main


def test_converts_file(tmp_path):
    src = tmp_path / "in.ppm"
    dst = tmp_path / "out.ppm"
    src.write_bytes(b"P3\n1 1\n255\n10 20 30\n")

    assert main(["6", str(src), str(dst)]) == 0
    assert dst.read_bytes() == b"P6\n1 1\n255\n" + bytes([10, 20, 30])


def test_info_prints_header(tmp_path, capsys):
    src = tmp_path / "in.ppm"
    src.write_bytes(b"P6\n2 1\n255\n" + bytes(6))

    assert main(["3", str(src), "--info"]) == 0
    assert capsys.readouterr().out.strip() == "P6 2x1 maxval=255"


def test_invalid_input_returns_error(tmp_path, caplog):
    src = tmp_path / "bad.ppm"
    src.write_bytes(b"P6\n0 1\n255\n")

    with caplog.at_level(logging.ERROR):
        assert main(["3", str(src), str(tmp_path / "out.ppm")]) == 1
    assert "width" in caplog.text


def test_missing_input_returns_error(tmp_path):
    assert main(["3", str(tmp_path / "nope.ppm"), str(tmp_path / "out.ppm")]) == 1


def test_outfile_required_without_info(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["3", str(tmp_path / "in.ppm")])
    assert info.value.code == 2


def test_rejects_unknown_format(tmp_path):
    with pytest.raises(SystemExit):
        main(["5", "a.ppm", "b.ppm"])


def test_help_is_localized(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])
    assert "Входной файл PPM" in capsys.readouterr().out
