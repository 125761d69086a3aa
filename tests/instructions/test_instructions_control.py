import pytest

from chip8_vm.core.quirks import Quirks
from chip8_vm.core.cpu import Chip8Cpu
from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import StackOverflowError, StackUnderflowError, UnknownOpcodeError
from chip8_vm.core.state import STACK_CAPACITY
from chip8_vm.transport.memory import PROGRAM_START

# @intent:test_suite ジャンプ・サブルーチン・条件スキップと、その異常系を検証します。


def _make_cpu(quirks=None):
    devices = Devices(quirks=quirks or Quirks())
    cpu = Chip8Cpu(devices)
    return cpu, devices


def _load(devices, address, *opcodes):
    for offset, opcode in enumerate(opcodes):
        devices.memory.write_block(address + offset * 2, [opcode >> 8, opcode & 0xFF])


@pytest.fixture
def machine_parts():
    return _make_cpu()


def test_jp(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0x1300)
    cpu.step()
    assert cpu.get_state().pc == 0x300


def test_call_and_ret(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0x2300)
    _load(devices, 0x300, 0x00EE)

    cpu.step()
    state = cpu.get_state()
    assert state.pc == 0x300
    assert state.stack == [PROGRAM_START + 2]

    cpu.step()
    assert state.pc == PROGRAM_START + 2
    assert state.stack == []


def test_sixteen_nested_calls_succeed_and_seventeenth_overflows(machine_parts):
    cpu, devices = machine_parts
    # 自分自身を呼び続けるサブルーチン
    _load(devices, PROGRAM_START, 0x2200)
    state = cpu.get_state()

    for _ in range(STACK_CAPACITY):
        cpu.step()
    assert len(state.stack) == STACK_CAPACITY

    with pytest.raises(StackOverflowError):
        cpu.step()
    # 失敗した命令は状態を変更しない
    assert len(state.stack) == STACK_CAPACITY
    assert state.pc == PROGRAM_START


def test_ret_with_empty_stack_underflows(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0x00EE)
    with pytest.raises(StackUnderflowError):
        cpu.step()
    assert cpu.get_state().pc == PROGRAM_START


def test_unknown_opcode_leaves_state_unchanged(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0xFFFF)
    before = cpu.get_state().copy()
    with pytest.raises(UnknownOpcodeError) as excinfo:
        cpu.step()
    assert excinfo.value.opcode == 0xFFFF
    assert cpu.get_state() == before
    assert cpu.cycle_count == 0


def test_sys_is_ignored(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0x0123)
    result = cpu.step()
    assert result.ok
    assert cpu.get_state().pc == PROGRAM_START + 2


@pytest.mark.parametrize("opcode, v0, v1, skipped", [
    (0x3012, 0x12, 0x00, True),   # SE V0, 12
    (0x3012, 0x13, 0x00, False),
    (0x4012, 0x13, 0x00, True),   # SNE V0, 12
    (0x4012, 0x12, 0x00, False),
    (0x5010, 0x07, 0x07, True),   # SE V0, V1
    (0x5010, 0x07, 0x08, False),
    (0x9010, 0x07, 0x08, True),   # SNE V0, V1
    (0x9010, 0x07, 0x07, False),
])
def test_conditional_skips(machine_parts, opcode, v0, v1, skipped):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, opcode)
    state = cpu.get_state()
    state.v[0] = v0
    state.v[1] = v1
    cpu.step()
    assert state.pc == PROGRAM_START + (4 if skipped else 2)


def test_jp_v0_adds_v0(machine_parts):
    cpu, devices = machine_parts
    _load(devices, PROGRAM_START, 0xB300)
    state = cpu.get_state()
    state.v[0] = 0x10
    state.v[3] = 0x20
    cpu.step()
    assert state.pc == 0x310


def test_jp_v0_with_vx_quirk():
    cpu, devices = _make_cpu(Quirks(jump_with_vx=True))
    _load(devices, PROGRAM_START, 0xB300)
    state = cpu.get_state()
    state.v[0] = 0x10
    state.v[3] = 0x20
    cpu.step()
    assert state.pc == 0x320
