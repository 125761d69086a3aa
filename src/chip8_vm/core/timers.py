# chip8_vm/core/timers.py
"""
Core Layer (タイマードライバ)

遅延タイマーとサウンドタイマーを60Hzの論理レートで減算します。
実時間の待機は行わず、呼び出し周期はホストのクロックが決めます。
"""
from chip8_vm.core.state import Chip8State

TIMER_HZ = 60


# @intent:responsibility 両タイマーを、0でなければ1だけ減算します。0未満にはなりません。
def tick_timers(state: Chip8State) -> None:
    if state.delay_timer > 0:
        state.delay_timer -= 1
    if state.sound_timer > 0:
        state.sound_timer -= 1
