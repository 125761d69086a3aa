# chip8_vm/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from typing import List, Optional

from chip8_vm.core.snapshot import OpKind, Operation


# @intent:utility_function オペコードの各フィールドを抽出します。
def field_x(opcode: int) -> int:
    return (opcode >> 8) & 0x0F

def field_y(opcode: int) -> int:
    return (opcode >> 4) & 0x0F

def field_n(opcode: int) -> int:
    return opcode & 0x000F

def field_nn(opcode: int) -> int:
    return opcode & 0x00FF

def field_nnn(opcode: int) -> int:
    return opcode & 0x0FFF


# @intent:utility_function オペランド表記用のフォーマッタ。
def reg(index: int) -> str:
    return f"V{index:X}"

def byte(value: int) -> str:
    return f"{value:02X}"

def addr(value: int) -> str:
    return f"{value:03X}"


# @intent:utility_function 全フィールドを埋めたOperationを生成します。
def make_operation(opcode: int, kind: OpKind, mnemonic: str, operands: Optional[List[str]] = None) -> Operation:
    return Operation(
        opcode=opcode,
        kind=kind,
        mnemonic=mnemonic,
        operands=operands or [],
        x=field_x(opcode),
        y=field_y(opcode),
        n=field_n(opcode),
        nn=field_nn(opcode),
        nnn=field_nnn(opcode),
    )

# @intent:responsibility どの命令にも該当しないオペコードの記述子を生成します。
def decode_unknown(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.UNKNOWN, "UNKNOWN", [f"{opcode:04X}"])
