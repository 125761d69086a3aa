# chip8_vm/loader/rom_loader.py
"""
ROMローダーモジュール。
CHIP-8の生バイナリ（*.ch8）をファイルから読み込み、マシンへ配置します。
"""
from pathlib import Path
from typing import Union

from chip8_vm.machine import Machine


class RomLoader:
    """
    ROMファイルを読み込み、Machine.load_romへ渡すローダー。
    サイズ超過はMachine側でRomTooLargeErrorとして報告されます。
    """
    def read_file(self, file_path: Union[str, Path]) -> bytes:
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"ROM file not found: {path}")
        return path.read_bytes()

    def load_file(self, file_path: Union[str, Path], machine: Machine) -> int:
        data = self.read_file(file_path)
        machine.load_rom(data)
        return len(data)
