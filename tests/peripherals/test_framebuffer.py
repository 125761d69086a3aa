import pytest

from chip8_vm.peripherals.display import HEIGHT, WIDTH, Framebuffer


@pytest.fixture
def fb():
    return Framebuffer()


def test_initial_frame_is_dark(fb):
    frame = fb.get_frame()
    assert len(frame) == HEIGHT
    assert all(len(row) == WIDTH for row in frame)
    assert fb.lit_count() == 0


def test_draw_sprite_msb_is_leftmost(fb):
    assert not fb.draw_sprite(10, 5, [0b10000001])
    assert fb.get_pixel(10, 5)
    assert fb.get_pixel(17, 5)
    assert not fb.get_pixel(11, 5)


def test_xor_collision(fb):
    fb.draw_sprite(0, 0, [0b11000000])
    assert fb.draw_sprite(1, 0, [0b10000000])
    assert fb.get_pixel(0, 0)
    assert not fb.get_pixel(1, 0)


def test_bottom_edge_is_clipped(fb):
    fb.draw_sprite(0, HEIGHT - 1, [0xFF, 0xFF])
    assert fb.lit_count() == 8
    assert not fb.get_pixel(0, 0)


def test_frame_is_a_snapshot(fb):
    frame = fb.get_frame()
    fb.draw_sprite(0, 0, [0x80])
    assert not frame[0][0]
    assert fb.get_frame()[0][0]


def test_get_pixel_out_of_range(fb):
    with pytest.raises(IndexError):
        fb.get_pixel(WIDTH, 0)
    with pytest.raises(IndexError):
        fb.get_pixel(0, -1)


def test_clear(fb):
    fb.draw_sprite(0, 0, [0xFF])
    fb.clear()
    assert fb.lit_count() == 0
