import logging

import pytest

from chip8_vm.config.models import EmulatorConfig
from chip8_vm.core.errors import UnknownOpcodeError
from chip8_vm.core.timers import TIMER_HZ
from chip8_vm.host.runner import FrameRunner
from chip8_vm.machine import Machine

# @intent:test_suite フレーム単位のサイクル実行とタイマー駆動の分離を検証します。


@pytest.fixture
def machine():
    return Machine()


def test_cycles_per_frame(machine):
    runner = FrameRunner(machine, cycles_per_second=700, timer_hz=60)
    assert runner.cycles_per_frame == 11
    assert runner.frame_interval_ms == 17
    assert FrameRunner(machine, cycles_per_second=30, timer_hz=60).cycles_per_frame == 1


def test_invalid_rates(machine):
    with pytest.raises(ValueError):
        FrameRunner(machine, cycles_per_second=0)


def test_run_frame_executes_cycles_then_ticks_timers_once(machine):
    # LD V0,05 / LD DT,V0 / JP 204 (無限ループ)
    machine.load_rom(bytes([0x60, 0x05, 0xF0, 0x15, 0x12, 0x04]))
    runner = FrameRunner(machine, cycles_per_second=600, timer_hz=60)
    report = runner.run_frame()

    assert report.cycles == 10
    assert report.error is None
    assert machine.delay_timer == 4
    assert machine.cpu.cycle_count == 10


def test_run_frame_reports_draw(machine):
    machine.load_rom(bytes([0x00, 0xE0, 0x12, 0x02]))
    runner = FrameRunner(machine, cycles_per_second=120, timer_hz=60)
    assert runner.run_frame().draw_needed
    assert not runner.run_frame().draw_needed


def test_error_halts_until_resumed(machine):
    machine.load_rom(bytes([0x60, 0x01, 0xFF, 0xFF]))
    runner = FrameRunner(machine, cycles_per_second=600, timer_hz=60)

    report = runner.run_frame()
    assert isinstance(report.error, UnknownOpcodeError)
    assert report.cycles == 1
    assert runner.halted

    report = runner.run_frame()
    assert report.cycles == 0
    assert isinstance(runner.halted_error, UnknownOpcodeError)

    runner.resume()
    assert not runner.halted


def test_waiting_for_key_still_ticks_timers(machine):
    # LD V0,03 / LD DT,V0 / LD V1,K
    machine.load_rom(bytes([0x60, 0x03, 0xF0, 0x15, 0xF1, 0x0A]))
    runner = FrameRunner(machine, cycles_per_second=600, timer_hz=60)
    report = runner.run_frame()
    assert report.cycles == 3
    assert machine.awaiting_key
    assert machine.delay_timer == 2


def test_default_timer_rate_matches_timer_driver(machine):
    runner = FrameRunner(machine)
    assert runner.frame_interval_ms == round(1000 / TIMER_HZ)
    assert EmulatorConfig().timer_hz == TIMER_HZ


def test_cycle_error_is_logged_once_at_error_level(machine, caplog):
    machine.load_rom(bytes([0xFF, 0xFF]))
    runner = FrameRunner(machine)
    with caplog.at_level(logging.DEBUG):
        runner.run_frame()
    reported = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(reported) == 1
    assert reported[0].levelno == logging.ERROR
    assert reported[0].name == "chip8_vm.host.runner"
