# chip8_vm/machine.py
"""
ホスト向けファサード

ホストはこのクラスの公開操作（ROMロード、サイクル実行、タイマー駆動、
キー入力、フレーム/サウンド状態の読み出し）のみを通してコアを操作します。
"""
import logging
from typing import List, Optional, Tuple

from chip8_vm.core.quirks import Quirks
from chip8_vm.core.cpu import Chip8Cpu
from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import Chip8Error, RomTooLargeError
from chip8_vm.core.snapshot import CycleResult
from chip8_vm.core.state import Chip8State
from chip8_vm.core.timers import tick_timers
from chip8_vm.peripherals.display import Framebuffer
from chip8_vm.peripherals.host import MachineObserver, RandomSource, SystemRandomSource
from chip8_vm.peripherals.keypad import Keypad
from chip8_vm.transport.memory import MEMORY_SIZE, PROGRAM_START, Memory

logger = logging.getLogger(__name__)

ROM_CAPACITY = MEMORY_SIZE - PROGRAM_START


# @intent:responsibility 1台のCHIP-8マシン（CPU・メモリ・画面・キー・タイマー）を所有し、ホストへ操作面を提供します。
class Machine:
    """
    CHIP-8仮想マシン。

    ホストはexecute_cycle()を任意の速度で、tick_timers()を60Hzで呼び出します。
    単一スレッドからの操作を前提とし、内部でロックは行いません。
    """
    def __init__(self, random_source: Optional[RandomSource] = None, quirks: Optional[Quirks] = None):
        self._devices = Devices(
            memory=Memory(),
            framebuffer=Framebuffer(),
            keypad=Keypad(),
            random_source=random_source or SystemRandomSource(),
            quirks=quirks or Quirks(),
        )
        self._cpu = Chip8Cpu(self._devices)
        self._observers: List[MachineObserver] = []
        self._sound_active = False

    # --- 構成 ---
    @property
    def quirks(self) -> Quirks:
        return self._devices.quirks

    @property
    def state(self) -> Chip8State:
        return self._cpu.get_state()

    @property
    def memory(self) -> Memory:
        return self._devices.memory

    @property
    def framebuffer(self) -> Framebuffer:
        return self._devices.framebuffer

    @property
    def keypad(self) -> Keypad:
        return self._devices.keypad

    @property
    def cpu(self) -> Chip8Cpu:
        return self._cpu

    def add_observer(self, observer: MachineObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: MachineObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # --- ライフサイクル ---
    # @intent:responsibility マシンを完全に初期化します（メモリ・レジスタ・画面・キーラッチ）。
    def reset(self) -> None:
        self._devices.memory.clear()
        self._devices.framebuffer.clear()
        self._devices.keypad.release_all()
        self._cpu.reset()
        self._set_sound_active(False)
        self._notify_frame()

    # @intent:responsibility マシンをリセットし、ROMを0x200から配置します。
    # @intent:pre-condition ROMは 4096 - 0x200 バイト以下であること。超える場合は状態を変更せずに失敗します。
    def load_rom(self, data: bytes) -> None:
        rom = bytes(data)
        if len(rom) > ROM_CAPACITY:
            raise RomTooLargeError(len(rom), ROM_CAPACITY)
        self.reset()
        self._devices.memory.write_block(PROGRAM_START, rom)
        logger.info("Loaded ROM of %d bytes at %#05x", len(rom), PROGRAM_START)

    # --- 実行 ---
    # @intent:responsibility 1サイクル実行します。エラーは送出せず、CycleResult.errorとして返します。
    def execute_cycle(self) -> CycleResult:
        try:
            result = self._cpu.step()
        except Chip8Error as e:
            logger.debug("Cycle failed at PC %04X: %s", self.state.pc, e)
            return CycleResult(error=e)

        if result.draw_needed:
            self._notify_frame()
        self._update_sound_state()
        return result

    # @intent:responsibility タイマードライバを1回駆動します（60Hzでホストが呼び出す）。
    def tick_timers(self) -> None:
        tick_timers(self.state)
        self._update_sound_state()

    # --- 入力 ---
    def set_key_state(self, code: int, pressed: bool) -> None:
        self._devices.keypad.set_key(code, pressed)

    # @intent:responsibility キー押下イベントでFX0Aのキー待ちを解決します。待機中でなければ何もしません。
    def report_key_pressed(self, code: int) -> bool:
        return self._cpu.resolve_key_wait(code)

    @property
    def awaiting_key(self) -> bool:
        return self.state.is_waiting_for_key

    # --- 出力 ---
    def get_pixel(self, x: int, y: int) -> bool:
        return self._devices.framebuffer.get_pixel(x, y)

    def get_frame(self) -> Tuple[Tuple[bool, ...], ...]:
        return self._devices.framebuffer.get_frame()

    @property
    def sound_timer(self) -> int:
        return self.state.sound_timer

    @property
    def delay_timer(self) -> int:
        return self.state.delay_timer

    @property
    def sound_active(self) -> bool:
        return self.state.sound_timer > 0

    def _update_sound_state(self) -> None:
        self._set_sound_active(self.sound_active)

    def _set_sound_active(self, active: bool) -> None:
        if active == self._sound_active:
            return
        self._sound_active = active
        for observer in self._observers:
            observer.on_sound(active)

    def _notify_frame(self) -> None:
        for observer in self._observers:
            observer.on_frame(self._devices.framebuffer)
