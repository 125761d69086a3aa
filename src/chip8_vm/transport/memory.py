# chip8_vm/transport/memory.py
"""
Transport Layer (メモリ)

CHIP-8の4KBアドレス空間（0x000-0xFFF）を表現します。
範囲外アクセスはMemoryOutOfBoundsErrorとして報告され、未定義の読み書きは発生しません。
"""
from typing import Iterable

from chip8_vm.core.errors import MemoryOutOfBoundsError

MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200

# @intent:constant 組み込み16進フォント（0-F、各5バイト）の配置先。
FONT_START = 0x050
FONT_GLYPH_SIZE = 5
FONT_SPRITES = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


# @intent:responsibility 固定サイズのバイト配列としてCHIP-8メモリを提供します。
class Memory:
    """
    CHIP-8のメインメモリ。
    生成時はゼロクリアされ、フォントスプライトが0x050から配置されます。
    """
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._size = size
        self._memory = bytearray(size)
        self._load_font()

    def _load_font(self) -> None:
        self._memory[FONT_START:FONT_START + len(FONT_SPRITES)] = FONT_SPRITES

    # @intent:responsibility メモリをゼロクリアし、フォントを再配置します。
    def clear(self) -> None:
        self._memory = bytearray(self._size)
        self._load_font()

    def get_size(self) -> int:
        return self._size

    # @intent:responsibility [address, address + length) がメモリ内に収まることを検証します。
    # @intent:post-condition 収まらない場合、最初に範囲外となるアドレスを持つMemoryOutOfBoundsErrorを送出します。
    def check_range(self, address: int, length: int = 1) -> None:
        if address < 0:
            raise MemoryOutOfBoundsError(address)
        if address + length > self._size:
            raise MemoryOutOfBoundsError(max(address, self._size))

    def read(self, address: int) -> int:
        self.check_range(address)
        return self._memory[address]

    def write(self, address: int, data: int) -> None:
        self.check_range(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    # @intent:responsibility ビッグエンディアンの16ビットワード（オペコード）を読み出します。
    def read_word(self, address: int) -> int:
        self.check_range(address, 2)
        return (self._memory[address] << 8) | self._memory[address + 1]

    def read_block(self, address: int, length: int) -> bytes:
        self.check_range(address, length)
        return bytes(self._memory[address:address + length])

    # @intent:responsibility 連続したバイト列を書き込みます。範囲検証は書き込み前に一括で行います。
    def write_block(self, address: int, data: Iterable[int]) -> None:
        payload = bytes(data)
        self.check_range(address, len(payload))
        self._memory[address:address + len(payload)] = payload
