# chip8_vm/peripherals/keypad.py
"""
16キーの入力ラッチ。ホストが書き込み、キー判定命令が読み出します。
"""
from typing import List, Tuple

KEY_COUNT = 16


# @intent:utility_function キーコードが0x0-0xFの範囲にあることを検証します。
def validate_key_code(code: int) -> int:
    if not isinstance(code, int) or not 0 <= code < KEY_COUNT:
        raise ValueError(f"Key code must be in 0x0-0xF, got {code!r}.")
    return code


# @intent:responsibility 各キーの押下状態を保持します。
class Keypad:
    def __init__(self):
        self._keys: List[bool] = [False] * KEY_COUNT

    def set_key(self, code: int, pressed: bool) -> None:
        self._keys[validate_key_code(code)] = bool(pressed)

    def is_pressed(self, code: int) -> bool:
        return self._keys[validate_key_code(code)]

    def release_all(self) -> None:
        self._keys = [False] * KEY_COUNT

    def pressed_keys(self) -> Tuple[int, ...]:
        return tuple(code for code, pressed in enumerate(self._keys) if pressed)
