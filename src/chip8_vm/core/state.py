# chip8_vm/core/state.py
"""
Core Layer (CPU状態)

CHIP-8のレジスタ群・スタック・タイマー・キー待ち状態を保持するデータ構造を定義します。
メモリ、フレームバッファ、キーラッチはそれぞれ専用のクラスが保持します。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from chip8_vm.transport.memory import PROGRAM_START

REGISTER_COUNT = 16
STACK_CAPACITY = 16
VF = 0xF


# @intent:responsibility CHIP-8 CPUのレジスタ状態を保持します。
@dataclass
class Chip8State:
    """
    CHIP-8のレジスタ状態を保持するデータクラス。
    VFは汎用レジスタであると同時に、キャリー/ボロー/シフト/衝突フラグとして使用されます。
    """
    pc: int = PROGRAM_START  # Program Counter
    i: int = 0x0000  # Index Register
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    stack: List[int] = field(default_factory=list)
    delay_timer: int = 0
    sound_timer: int = 0
    # @intent:rationale FX0Aのキー待ちはブロッキングではなく状態として表現する。
    #                  値は結果を書き込むレジスタ番号、待機していなければNone。
    awaiting_key: Optional[int] = None

    @property
    def vf(self) -> int:
        return self.v[VF]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[VF] = value & 0xFF

    @property
    def is_waiting_for_key(self) -> bool:
        return self.awaiting_key is not None

    # @intent:responsibility 可変フィールドまで独立した複製を返します。
    def copy(self) -> 'Chip8State':
        return Chip8State(
            pc=self.pc,
            i=self.i,
            v=list(self.v),
            stack=list(self.stack),
            delay_timer=self.delay_timer,
            sound_timer=self.sound_timer,
            awaiting_key=self.awaiting_key,
        )
