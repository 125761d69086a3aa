# chip8_vm/core/cpu.py
"""
Core Layer (CPU / 実行器)

このモジュールは、CHIP-8の命令サイクル（フェッチ→デコード→PC更新→実行）を駆動します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import logging
from typing import Optional

from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import Chip8Error
from chip8_vm.core.snapshot import CycleResult, Operation
from chip8_vm.core.state import Chip8State
from chip8_vm.instructions import decode_opcode, execute_instruction
from chip8_vm.peripherals.keypad import validate_key_code

logger = logging.getLogger(__name__)


# @intent:responsibility CHIP-8 CPUの状態管理と命令サイクルの駆動を行います。
class Chip8Cpu:
    """
    CHIP-8をエミュレートするクラス。
    レジスタ状態（Chip8State）を所有し、メモリ等の周辺装置はDevices経由で参照します。
    """
    # @intent:responsibility CPUの状態と周辺装置への参照を初期化します。
    def __init__(self, devices: Devices):
        self._devices = devices
        self._state: Chip8State = self._create_initial_state()
        self._cycle_count: int = 0
        self._last_operation: Optional[Operation] = None
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    def _create_initial_state(self) -> Chip8State:
        return Chip8State()

    # @intent:responsibility CPUを初期状態に戻します。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._cycle_count = 0
        self._last_operation = None

    def get_state(self) -> Chip8State:
        return self._state

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    @property
    def last_operation(self) -> Optional[Operation]:
        return self._last_operation

    # @intent:responsibility 現在のPCからビッグエンディアンの2バイトをフェッチします。
    def _fetch(self) -> int:
        return self._devices.memory.read_word(self._state.pc)

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    # @intent:responsibility 実行前にPCを次の命令へ進めます。分岐系の命令は実行時に上書きします。
    def _update_pc(self) -> None:
        self._state.pc = (self._state.pc + 2) & 0xFFFF

    def _execute(self, operation: Operation) -> bool:
        return execute_instruction(operation, self._state, self._devices)

    # @intent:responsibility CPUを1命令サイクル進めます。
    # @intent:rationale 各命令は状態を変更する前に検証を終えるため、失敗時に戻す必要があるのは
    #                  先行して進めたPCのみ。これにより失敗した命令は状態を一切変更しません。
    def step(self) -> CycleResult:
        """
        1命令を実行し、CycleResultを返します。
        キー待ち中は何も実行せず、waiting=Trueの結果を返します。
        失敗時はChip8Errorを送出します。
        """
        if self._state.is_waiting_for_key:
            return CycleResult(waiting=True)

        initial_pc = self._state.pc
        opcode = self._fetch()
        operation = self._decode(opcode)

        self._update_pc()
        try:
            draw_needed = self._execute(operation)
        except Chip8Error:
            self._state.pc = initial_pc
            raise

        self._cycle_count += 1
        self._last_operation = operation
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("PC %04X I %04X [%s]", initial_pc, self._state.i, operation)

        return CycleResult(draw_needed=draw_needed, operation=operation)

    # @intent:responsibility FX0Aのキー待ちを解決します。待機していなければ何もしません。
    # @intent:return キー待ちが解決された場合にTrue。
    def resolve_key_wait(self, code: int) -> bool:
        validate_key_code(code)
        register = self._state.awaiting_key
        if register is None:
            return False
        self._state.v[register] = code
        self._state.awaiting_key = None
        return True
