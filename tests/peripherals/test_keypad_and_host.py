import pytest

from chip8_vm.peripherals.host import SeededRandomSource, SequenceRandomSource, SystemRandomSource
from chip8_vm.peripherals.keypad import Keypad, validate_key_code


def test_keypad_latch():
    keypad = Keypad()
    keypad.set_key(0xA, True)
    keypad.set_key(0x3, True)
    assert keypad.is_pressed(0xA)
    assert keypad.pressed_keys() == (0x3, 0xA)
    keypad.set_key(0xA, False)
    assert not keypad.is_pressed(0xA)
    keypad.release_all()
    assert keypad.pressed_keys() == ()


@pytest.mark.parametrize("code", [-1, 16, "1"])
def test_invalid_key_codes(code):
    with pytest.raises(ValueError):
        validate_key_code(code)
    with pytest.raises(ValueError):
        Keypad().set_key(code, True)


def test_seeded_random_source_is_reproducible():
    a, b = SeededRandomSource(42), SeededRandomSource(42)
    assert [a.next_byte() for _ in range(8)] == [b.next_byte() for _ in range(8)]


def test_system_random_source_range():
    source = SystemRandomSource()
    assert all(0 <= source.next_byte() <= 0xFF for _ in range(32))


def test_sequence_random_source_cycles():
    source = SequenceRandomSource([1, 2, 0x1FF])
    assert [source.next_byte() for _ in range(4)] == [1, 2, 0xFF, 1]


def test_sequence_random_source_requires_values():
    with pytest.raises(ValueError):
        SequenceRandomSource([])
