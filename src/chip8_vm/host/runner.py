# chip8_vm/host/runner.py
"""
フレーム単位の実行制御モジュール。

命令サイクルとタイマーの呼び出し頻度を分離して管理します。
1フレーム（タイマー1周期）ごとに cycles_per_second / timer_hz 回のサイクルを実行し、
最後にタイマーを1回駆動します。実時間の待機は呼び出し側（QTimerなど）の責務です。
"""
import logging
from dataclasses import dataclass
from typing import Optional

from chip8_vm.core.errors import Chip8Error
from chip8_vm.core.timers import TIMER_HZ
from chip8_vm.machine import Machine

logger = logging.getLogger(__name__)


# @intent:data_structure 1フレーム分の実行結果。
@dataclass(frozen=True)
class FrameReport:
    cycles: int
    draw_needed: bool
    error: Optional[Chip8Error] = None


# @intent:responsibility マシンのサイクル実行とタイマー駆動をフレーム単位で行います。
class FrameRunner:
    """
    ホストのクロック（60Hzのタイマーイベント等）から呼ばれるrun_frame()を提供します。
    エラー発生後は停止し、resume()が呼ばれるまでフレームを実行しません。
    """
    def __init__(self, machine: Machine, cycles_per_second: int = 700, timer_hz: int = TIMER_HZ):
        if cycles_per_second <= 0 or timer_hz <= 0:
            raise ValueError("cycles_per_second and timer_hz must be positive.")
        self._machine = machine
        self._timer_hz = timer_hz
        self._cycles_per_frame = max(1, cycles_per_second // timer_hz)
        self._halted_error: Optional[Chip8Error] = None

    @property
    def machine(self) -> Machine:
        return self._machine

    @property
    def cycles_per_frame(self) -> int:
        return self._cycles_per_frame

    @property
    def frame_interval_ms(self) -> int:
        return max(1, round(1000 / self._timer_hz))

    @property
    def halted(self) -> bool:
        return self._halted_error is not None

    @property
    def halted_error(self) -> Optional[Chip8Error]:
        return self._halted_error

    # @intent:responsibility エラーによる停止を解除します。
    def resume(self) -> None:
        self._halted_error = None

    # @intent:responsibility 1フレーム分のサイクルを実行し、タイマーを1回駆動します。
    # @intent:rationale キー待ち中もタイマーは進める。待機はサイクル側の状態であり、時間は止まらないため。
    def run_frame(self) -> FrameReport:
        if self._halted_error is not None:
            return FrameReport(cycles=0, draw_needed=False, error=self._halted_error)

        draw_needed = False
        executed = 0
        for _ in range(self._cycles_per_frame):
            result = self._machine.execute_cycle()
            if result.error is not None:
                self._halted_error = result.error
                logger.error("Emulation halted: %s", result.error)
                return FrameReport(cycles=executed, draw_needed=draw_needed, error=result.error)
            if result.waiting:
                break
            executed += 1
            draw_needed = draw_needed or result.draw_needed

        self._machine.tick_timers()
        return FrameReport(cycles=executed, draw_needed=draw_needed)
