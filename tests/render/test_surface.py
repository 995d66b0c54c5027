from __future__ import annotations

from pathlib import Path

import hypothesis.strategies as st
import pytest
from conftest import RecordingTerminal
from hypothesis import given, settings

from termgl.core.geometry import Direction, TextAlignment
from termgl.render.surface import Surface

W, H = 10, 5


def test_new_surface_is_blank() -> None:
    s = Surface.new(W, H)
    assert s.width == W
    assert s.height == H
    data = s.get_raw_data()
    assert len(data) == H
    assert all(len(row) == W for row in data)
    assert all(c == " " for row in data for c in row)


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError):
        Surface(-1, 3)
    with pytest.raises(ValueError):
        Surface(3, -1)


def test_zero_size_surface() -> None:
    s = Surface(0, 0)
    assert s.rows() == []
    assert s.draw_pixel(0, 0, "#") is False


def test_raw_data_is_a_copy() -> None:
    s = Surface(3, 2)
    data = s.raw_data
    data[0][0] = "X"
    assert s.raw_data[0][0] == " "


@settings(deadline=None, max_examples=200)
@given(
    x=st.integers(min_value=-5, max_value=W + 5),
    y=st.integers(min_value=-5, max_value=H + 5),
)
def test_draw_pixel_reports_placement(x: int, y: int) -> None:
    s = Surface(W, H)
    s.fill(".")
    before = s.raw_data
    placed = s.draw_pixel(x, y, "#")
    inside = 0 <= x < W and 0 <= y < H
    assert placed is inside
    after = s.raw_data
    if inside:
        assert after[y][x] == "#"
        after[y][x] = "."
    assert after == before


@settings(deadline=None, max_examples=100)
@given(
    x=st.integers(min_value=-3, max_value=W + 3),
    y=st.integers(min_value=-3, max_value=H + 3),
    n=st.integers(min_value=-12, max_value=12),
)
def test_straight_line_mirror_on_surface(x: int, y: int, n: int) -> None:
    a = Surface(W, H)
    a.draw_straight_line(x, y, n, Direction.RIGHT, "#")
    b = Surface(W, H)
    b.draw_straight_line(x, y, -n, Direction.LEFT, "#")
    assert a.raw_data == b.raw_data


def test_fill_replaces_every_cell() -> None:
    s = Surface(4, 3)
    s.draw_pixel(1, 1, "#")
    s.fill("~")
    assert s.rows() == ["~~~~"] * 3


def test_rectangle_end_to_end(capsys: pytest.CaptureFixture[str]) -> None:
    s = Surface.new(10, 5)
    s.fill(".")
    s.draw_rectangle(1, 1, 7, 3, "#", False)
    s.display()
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "..........",
        ".#######..",
        ".#.....#..",
        ".#######..",
        "..........",
    ]
    assert out.endswith("\n")


def test_filled_rectangle_clipped_at_edges() -> None:
    s = Surface(4, 4)
    s.draw_rectangle(2, 2, 5, 5, "#", fill=True)
    assert s.rows() == ["    ", "    ", "  ##", "  ##"]


def test_draw_text_aligned_and_clipped() -> None:
    s = Surface(12, 1)
    s.draw_text(10, 0, "hi", TextAlignment.CENTER)
    assert s.rows() == ["         hi "]
    s.draw_text(10, 0, "world")
    assert s.rows() == ["         hwo"]
    s.draw_text(0, 0, "ab", TextAlignment.RIGHT)
    assert s.rows() == ["         hwo"]


def test_draw_line_and_polygon() -> None:
    s = Surface(6, 6)
    s.draw_line(0, 0, 5, 5, "\\")
    assert [s.raw_data[i][i] for i in range(6)] == ["\\"] * 6
    p = Surface(10, 8)
    p.draw_polygon([(1, 1), (9, 3), (5, 7)], "#")
    for x, y in [(1, 1), (9, 3), (5, 7)]:
        assert p.raw_data[y][x] == "#"


def test_draw_ellipse_outline() -> None:
    s = Surface(5, 3)
    s.draw_ellipse(2, 1, 2, 1, "o")
    assert s.rows() == [" ooo ", "o   o", " ooo "]
    s.draw_ellipse(2, 1, 2, 1, "#", fill=True)
    assert s.rows() == [" ### ", "#####", " ### "]


def test_blit_opaque_covers_target() -> None:
    dst = Surface(W, H)
    dst.fill(".")
    src = Surface(W, H)
    src.fill("#")
    dst.blit(0, 0, src)
    assert dst.rows() == ["#" * W] * H


def test_blit_blank_surface_is_noop() -> None:
    dst = Surface(W, H)
    dst.fill(".")
    dst.draw_text(2, 2, "keep")
    before = dst.raw_data
    dst.blit(0, 0, Surface(W, H))
    assert dst.raw_data == before


def test_blit_spaces_are_transparent() -> None:
    dst = Surface(5, 3)
    dst.fill(".")
    sprite = Surface(3, 3)
    sprite.draw_rectangle(0, 0, 3, 3, "+")
    dst.blit(1, 0, sprite)
    assert dst.rows() == [".+++.", ".+.+.", ".+++."]


def test_blit_offset_clips_to_destination() -> None:
    dst = Surface(W, H)
    dst.fill(".")
    src = Surface(3, 3)
    src.fill("#")
    dst.blit(8, 3, src)
    rows = dst.rows()
    assert rows[3] == "........##"
    assert rows[4] == "........##"
    assert sum(row.count("#") for row in rows) == 4
    dst.blit(-2, -2, src)
    assert dst.rows()[0] == "#........."


def test_blit_onto_itself_uses_snapshot() -> None:
    s = Surface(6, 1)
    s.draw_text(0, 0, "ab")
    s.blit(1, 0, s)
    assert s.rows() == ["aab   "]
    s.blit(-1, 0, s)
    assert s.rows() == ["abb   "]


@pytest.mark.parametrize("ch", ["", "ab"])
def test_cells_must_be_one_character(ch: str) -> None:
    s = Surface(4, 2)
    s.fill(".")
    with pytest.raises(ValueError, match="exactly one character"):
        s.fill(ch)
    with pytest.raises(ValueError):
        s.draw_pixel(0, 0, ch)
    with pytest.raises(ValueError):
        s.draw_line(0, 0, 3, 1, ch)
    with pytest.raises(ValueError):
        s.draw_rectangle(0, 0, 4, 2, ch)
    with pytest.raises(ValueError):
        s.draw_straight_line(0, 0, 0, Direction.RIGHT, ch)
    with pytest.raises(ValueError):
        s.draw_ellipse(1, 1, 1, 1, ch)
    with pytest.raises(ValueError):
        s.draw_polygon([(0, 0), (3, 1)], ch)
    assert s.rows() == ["....", "...."]
    assert all(len(row) == 4 for row in s.rows())


def test_display_through_terminal() -> None:
    term = RecordingTerminal()
    s = Surface(3, 2)
    s.fill("x")
    s.display(terminal=term)
    assert term.output == ["xxx\n", "xxx\n"]
    assert term.flushes == 1


def test_save_text(tmp_path: Path) -> None:
    s = Surface(3, 2)
    s.draw_text(0, 1, "abc")
    path = tmp_path / "frames" / "scene.txt"
    s.save_text(path)
    assert path.read_text(encoding="utf-8") == "   \nabc\n"
    assert str(s) == "   \nabc"
