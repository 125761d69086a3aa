# tests/core/test_cpu.py
"""
chip8_vm.core.cpuモジュールの単体テスト。
"""
import logging

import pytest

from chip8_vm.core.cpu import Chip8Cpu
from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import MemoryOutOfBoundsError
from chip8_vm.core.snapshot import OpKind
from chip8_vm.core.state import Chip8State
from chip8_vm.transport.memory import PROGRAM_START

# @intent:test_suite CPUの状態管理と命令サイクル（フェッチ→デコード→PC更新→実行）を検証します。


class TestChip8State:
    """
    Chip8Stateの単体テスト。
    """
    def test_default_state(self):
        state = Chip8State()
        assert state.pc == PROGRAM_START
        assert state.i == 0
        assert state.v == [0] * 16
        assert state.stack == []
        assert state.delay_timer == 0
        assert state.sound_timer == 0
        assert not state.is_waiting_for_key

    def test_vf_setter_masks_to_byte(self):
        state = Chip8State()
        state.vf = 0x1FF
        assert state.v[0xF] == 0xFF

    def test_copy_is_independent(self):
        state = Chip8State()
        clone = state.copy()
        clone.v[0] = 1
        clone.stack.append(0x300)
        assert state.v[0] == 0
        assert state.stack == []
        assert clone != state


@pytest.fixture
def cpu_and_devices():
    devices = Devices()
    return Chip8Cpu(devices), devices


class TestChip8Cpu:
    """
    Chip8Cpuの命令サイクルの単体テスト。
    """
    def test_step_fetches_big_endian_and_advances_pc(self, cpu_and_devices):
        cpu, devices = cpu_and_devices
        devices.memory.write_block(PROGRAM_START, [0x60, 0x2A])
        result = cpu.step()

        assert result.ok
        assert result.operation.kind == OpKind.LD_VX_NN
        assert cpu.get_state().v[0] == 0x2A
        assert cpu.get_state().pc == PROGRAM_START + 2
        assert cpu.cycle_count == 1
        assert cpu.last_operation == result.operation

    def test_reset_restores_initial_state(self, cpu_and_devices):
        cpu, devices = cpu_and_devices
        devices.memory.write_block(PROGRAM_START, [0x60, 0x2A])
        cpu.step()
        cpu.reset()
        assert cpu.get_state() == Chip8State()
        assert cpu.cycle_count == 0
        assert cpu.last_operation is None

    def test_fetch_past_end_of_memory(self, cpu_and_devices):
        cpu, _ = cpu_and_devices
        cpu.get_state().pc = 0xFFF
        with pytest.raises(MemoryOutOfBoundsError):
            cpu.step()
        assert cpu.get_state().pc == 0xFFF

    def test_step_emits_debug_trace(self, cpu_and_devices, caplog):
        cpu, devices = cpu_and_devices
        devices.memory.write_block(PROGRAM_START, [0xA1, 0x23])
        with caplog.at_level(logging.DEBUG, logger="chip8_vm.core.cpu"):
            cpu.step()
        assert "PC 0200 I 0123 [LD I, 123]" in caplog.text
