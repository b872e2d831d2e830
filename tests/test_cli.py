"""Tests for the command line entry point."""

import pytest
from PIL import Image

from termchip.cli import main


@pytest.fixture
def rom(tmp_path):
    def write(data):
        path = tmp_path / "prog.ch8"
        path.write_bytes(bytes(data))
        return str(path)
    return write


def test_headless_run_succeeds(rom, capsys):
    path = rom([0x60, 0x05, 0x12, 0x02])

    status = main([path, "--headless", "--cycles", "2", "--rate", "0"])

    assert status == 0
    captured = capsys.readouterr()
    assert "＃" not in captured.out


def test_error_exits_non_zero(rom, capsys):
    path = rom([0x00, 0xEE])

    status = main([path, "--headless", "--cycles", "2", "--rate", "0"])

    assert status == 1
    assert "return with empty call stack" in capsys.readouterr().err


def test_missing_rom(tmp_path, capsys):
    status = main([str(tmp_path / "missing.ch8"), "--headless"])

    assert status == 1
    assert "Cannot load" in capsys.readouterr().err


def test_oversized_rom(rom, capsys):
    path = rom(bytes(4000))

    status = main([path, "--headless"])

    assert status == 1
    assert "4000 bytes" in capsys.readouterr().err


def test_invalid_speed(rom):
    path = rom([0x12, 0x00])
    assert main([path, "--headless", "--speed", "0"]) == 2


def test_terminal_frame_is_painted(rom, capsys):
    # I = glyph 0; draw it at (0, 0); loop
    path = rom([0xA0, 0x00, 0xD0, 0x05, 0x12, 0x04])

    status = main([path, "--cycles", "1", "--rate", "0", "--speed", "3"])

    assert status == 0
    out = capsys.readouterr().out
    lines = out.split("\033[H\033[2J")[-1].splitlines()
    assert len(lines) == 32
    assert lines[0].startswith("＃＃＃＃．")
    assert lines[1].startswith("＃．．＃．")


def test_snapshot(rom, tmp_path):
    path = rom([0xA0, 0x00, 0xD0, 0x05, 0x12, 0x04])
    snapshot = tmp_path / "screen.png"

    status = main([path, "--headless", "--cycles", "1", "--rate", "0", "--speed", "3",
                   "--snapshot", str(snapshot)])

    assert status == 0
    image = Image.open(snapshot)
    assert image.size == (64 * 8, 32 * 8)
    assert image.getpixel((0, 0)) == (0, 255, 0)
    assert image.getpixel((4 * 8, 0)) == (0, 0, 0)


def test_bad_arguments_exit_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
