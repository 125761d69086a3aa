# chip8_vm/__init__.py
"""
CHIP-8仮想マシン。

ホストはMachineを生成し、load_rom() → execute_cycle() / tick_timers() の順に駆動します。
"""
from chip8_vm.core.quirks import Quirks
from chip8_vm.core.errors import (
    Chip8Error, MemoryOutOfBoundsError, RomTooLargeError,
    StackOverflowError, StackUnderflowError, UnknownOpcodeError,
)
from chip8_vm.core.snapshot import CycleResult, OpKind, Operation
from chip8_vm.instructions import decode_opcode
from chip8_vm.machine import Machine

__all__ = [
    "Machine", "Quirks", "CycleResult", "Operation", "OpKind", "decode_opcode",
    "Chip8Error", "StackOverflowError", "StackUnderflowError", "UnknownOpcodeError",
    "MemoryOutOfBoundsError", "RomTooLargeError",
]
