# chip8_vm/core/snapshot.py
"""
デコード済み命令とサイクル結果の不変データ構造

このモジュールは、デコーダが生成する命令記述子（Operation）と、
1サイクル実行の結果としてホストへ返すCycleResultを定義します。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from chip8_vm.core.errors import Chip8Error


# @intent:responsibility CHIP-8の全命令種別を列挙します。
class OpKind(Enum):
    SYS = "0NNN"
    CLS = "00E0"
    RET = "00EE"
    JP = "1NNN"
    CALL = "2NNN"
    SE_VX_NN = "3XNN"
    SNE_VX_NN = "4XNN"
    SE_VX_VY = "5XY0"
    LD_VX_NN = "6XNN"
    ADD_VX_NN = "7XNN"
    LD_VX_VY = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_VX_VY = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_VX_VY = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_VX_K = "FX0A"
    LD_DT_VX = "FX15"
    LD_ST_VX = "FX18"
    ADD_I_VX = "FX1E"
    LD_F_VX = "FX29"
    LD_B_VX = "FX33"
    LD_I_VX = "FX55"
    LD_VX_I = "FX65"
    UNKNOWN = "????"


# @intent:responsibility デコード済みの1命令を記録します。
@dataclass(frozen=True)  # 不変データ構造
class Operation:
    """
    16ビットのオペコードから抽出した命令種別とオペランドフィールド。
    x, y, n, nn, nnn はエンコーディング上の全フィールドを保持し、
    命令種別ごとに意味のあるものだけが実行時に参照されます。
    """
    opcode: int
    kind: OpKind
    mnemonic: str  # 例: "LD"
    operands: List[str] = field(default_factory=list)  # 例: ["V0", "05"]
    x: int = 0
    y: int = 0
    n: int = 0
    nn: int = 0
    nnn: int = 0

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    def __str__(self) -> str:
        if self.operands:
            return f"{self.mnemonic} {', '.join(self.operands)}"
        return self.mnemonic


# @intent:responsibility execute_cycle()の結果をホストへ返します。
@dataclass(frozen=True)
class CycleResult:
    """
    1サイクルの実行結果。
    errorが設定されている場合、その命令による状態変更は一切行われていません。
    """
    draw_needed: bool = False
    operation: Optional[Operation] = None
    error: Optional[Chip8Error] = None
    waiting: bool = False  # FX0Aのキー待ちで何も実行しなかった

    @property
    def ok(self) -> bool:
        return self.error is None
