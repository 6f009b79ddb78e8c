from __future__ import annotations

import pytest
from PIL import Image

import main
from bitmap import HEADER_SIZE, encode_bitmap, row_stride
from parser import parse_scene_file
from renderer import render_scene

EXAMPLE_SCENE = (
    'rectangle id="1" color="ff0000" x="0" y="0" width="2" height="2"\n'
    'circle id="2" color="00ff00" x="5" y="5" radius="1"\n'
)


@pytest.fixture
def scene_file(tmp_path):
    def write(text: str):
        path = tmp_path / "scene.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


class TestDrawing:
    def test_writes_readable_bitmap(self, tmp_path, scene_file) -> None:
        output = tmp_path / "out.bmp"
        assert main.main([scene_file(EXAMPLE_SCENE), str(output), "10", "10"]) == main.SUCCESS

        data = output.read_bytes()
        assert len(data) == HEADER_SIZE + row_stride(10) * 10
        assert data[:2] == b"BM"

        with Image.open(output) as image:
            image = image.convert("RGB")
            assert image.size == (10, 10)
            assert image.getpixel((0, 0)) == (255, 0, 0)
            assert image.getpixel((1, 1)) == (255, 0, 0)
            assert image.getpixel((2, 2)) == (255, 255, 255)
            assert image.getpixel((5, 5)) == (0, 255, 0)

    def test_file_matches_encoder(self, tmp_path, scene_file) -> None:
        path = scene_file(EXAMPLE_SCENE)
        output = tmp_path / "out.bmp"
        assert main.main([path, str(output), "7", "5"]) == main.SUCCESS
        expected = encode_bitmap(render_scene(parse_scene_file(path), 7, 5))
        assert output.read_bytes() == expected

    def test_empty_scene_is_white(self, tmp_path, scene_file) -> None:
        output = tmp_path / "out.bmp"
        assert main.main([scene_file(""), str(output), "3", "2"]) == main.SUCCESS
        with Image.open(output) as image:
            colors = image.convert("RGB").getcolors()
        assert colors == [(6, (255, 255, 255))]

    def test_background_option(self, tmp_path, scene_file) -> None:
        output = tmp_path / "out.bmp"
        args = [scene_file(""), str(output), "2", "2", "-b", "0,0,255"]
        assert main.main(args) == main.SUCCESS
        with Image.open(output) as image:
            assert image.convert("RGB").getpixel((1, 1)) == (0, 0, 255)

    def test_png_preview(self, tmp_path, scene_file) -> None:
        output = tmp_path / "out.bmp"
        preview = tmp_path / "out.png"
        args = [scene_file(EXAMPLE_SCENE), str(output), "10", "10", "--png", str(preview), "-v"]
        assert main.main(args) == main.SUCCESS
        with Image.open(preview) as image:
            assert image.format == "PNG"
            assert image.mode == "RGB"
            assert image.size == (10, 10)
            assert image.getpixel((0, 0))[:3] == (255, 0, 0)


class TestExitCodes:
    @pytest.mark.parametrize(
        "args",
        [[], ["a.txt", "b.bmp", "10"], ["a.txt", "b.bmp", "x", "10"], ["a.txt", "b.bmp", "10", "-5"], ["a.txt", "b.bmp", "1", "1", "--bogus"]],
    )
    def test_usage(self, args: list[str], capsys) -> None:
        assert main.main(args) == main.ERR_USAGE
        assert "Usage:" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys) -> None:
        missing = str(tmp_path / "missing.txt")
        assert main.main([missing, str(tmp_path / "o.bmp"), "1", "1"]) == main.ERR_READ_INPUT
        assert f'Error: could not read input file "{missing}".' in capsys.readouterr().out

    def test_invalid_entry(self, tmp_path, scene_file, capsys) -> None:
        output = tmp_path / "out.bmp"
        path = scene_file('circle id="1" color="0" x="0" y="0" radius="1"\nrectangle id=1\n')
        assert main.main([path, str(output), "4", "4"]) == main.ERR_INVALID_INPUT
        assert "Error: invalid entry on line 2." in capsys.readouterr().out
        assert not output.exists()

    def test_duplicate_id(self, tmp_path, scene_file, capsys) -> None:
        line = 'circle id="1" color="0" x="0" y="0" radius="1"\n'
        assert main.main([scene_file(line * 2), str(tmp_path / "o.bmp"), "4", "4"]) == main.ERR_DUPLICATE_ID
        assert 'Error: duplicate ID "1".' in capsys.readouterr().out

    def test_unwritable_output(self, tmp_path, scene_file, capsys) -> None:
        assert main.main([scene_file(""), str(tmp_path), "4", "4"]) == main.ERR_WRITE_FILE
        assert "Error: could not write file" in capsys.readouterr().out

    def test_long_property_name(self, tmp_path, scene_file, capsys) -> None:
        path = scene_file('circle averyveryverylongname="1"\n')
        assert main.main([path, str(tmp_path / "o.bmp"), "4", "4"]) == main.ERR_UNRECOGNISED
        assert "Error: Unrecognised error." in capsys.readouterr().out


class TestDimensions:
    @pytest.mark.parametrize("text, expected", [("0", 0), ("640", 640), ("+3", 3), ("-1", None), ("1.5", None), ("", None), (" 2", None)])
    def test_parse_dimension(self, text: str, expected) -> None:
        assert main.parse_dimension(text) == expected
