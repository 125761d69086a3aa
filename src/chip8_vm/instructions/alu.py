# chip8_vm/instructions/alu.py
"""
算術論理演算命令（7XNN, 8XY_, CXNN）の実装。
レジスタは8ビットで、桁あふれは256を法として折り返します。
"""
from chip8_vm.core.devices import Devices
from chip8_vm.core.snapshot import OpKind, Operation
from chip8_vm.core.state import Chip8State
from .base import byte, field_nn, field_x, field_y, make_operation, reg


def _xy(opcode: int):
    return [reg(field_x(opcode)), reg(field_y(opcode))]

# --- ADD Vx, byte ---
# @intent:responsibility 7XNN (ADD Vx, byte) 命令をデコードします。
def decode_add_vx_nn(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.ADD_VX_NN, "ADD", [reg(field_x(opcode)), byte(field_nn(opcode))])

# @intent:responsibility Vx += NN。VFは変更しません。
def execute_add_vx_nn(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- LD Vx, Vy ---
def decode_ld_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_VX_VY, "LD", _xy(opcode))

def execute_ld_vx_vy(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- OR / AND / XOR ---
def decode_or(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.OR, "OR", _xy(opcode))

def decode_and(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.AND, "AND", _xy(opcode))

def decode_xor(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.XOR, "XOR", _xy(opcode))

# @intent:utility_function 論理演算の結果を格納し、クセ設定に応じてVFをリセットします。
def _store_logic(state: Chip8State, devices: Devices, op: Operation, result: int) -> None:
    state.v[op.x] = result
    if devices.quirks.logic_resets_vf:
        state.vf = 0

def execute_or(state: Chip8State, devices: Devices, op: Operation) -> None:
    _store_logic(state, devices, op, state.v[op.x] | state.v[op.y])

def execute_and(state: Chip8State, devices: Devices, op: Operation) -> None:
    _store_logic(state, devices, op, state.v[op.x] & state.v[op.y])

def execute_xor(state: Chip8State, devices: Devices, op: Operation) -> None:
    _store_logic(state, devices, op, state.v[op.x] ^ state.v[op.y])

# --- ADD Vx, Vy ---
# @intent:responsibility 8XY4 (ADD Vx, Vy) 命令をデコードします。
def decode_add_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.ADD_VX_VY, "ADD", _xy(opcode))

# @intent:responsibility Vx = Vx + Vy。和が255を超えた場合のみVF=1。
# @intent:rationale フラグは結果の後に書き込む。X=Fの場合はフラグ値が残る。
def execute_add_vx_vy(state: Chip8State, devices: Devices, op: Operation) -> None:
    total = state.v[op.x] + state.v[op.y]
    state.v[op.x] = total & 0xFF
    state.vf = 1 if total > 0xFF else 0

# --- SUB / SUBN ---
def decode_sub(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SUB, "SUB", _xy(opcode))

# @intent:responsibility Vx = Vx - Vy。ボローが発生しない（Vx >= Vy）場合にVF=1。
def execute_sub(state: Chip8State, devices: Devices, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vx - vy) & 0xFF
    state.vf = 1 if vx >= vy else 0

def decode_subn(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SUBN, "SUBN", _xy(opcode))

# @intent:responsibility Vx = Vy - Vx。ボローが発生しない（Vy >= Vx）場合にVF=1。
def execute_subn(state: Chip8State, devices: Devices, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vy - vx) & 0xFF
    state.vf = 1 if vy >= vx else 0

# --- SHR / SHL ---
def decode_shr(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SHR, "SHR", _xy(opcode))

def decode_shl(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SHL, "SHL", _xy(opcode))

def _shift_source(state: Chip8State, devices: Devices, op: Operation) -> int:
    return state.v[op.y] if devices.quirks.shift_uses_vy else state.v[op.x]

# @intent:responsibility 1ビット右シフト。VFには押し出された最下位ビットが入ります。
def execute_shr(state: Chip8State, devices: Devices, op: Operation) -> None:
    source = _shift_source(state, devices, op)
    state.v[op.x] = source >> 1
    state.vf = source & 0x01

# @intent:responsibility 1ビット左シフト。VFには押し出された最上位ビットが入ります。
def execute_shl(state: Chip8State, devices: Devices, op: Operation) -> None:
    source = _shift_source(state, devices, op)
    state.v[op.x] = (source << 1) & 0xFF
    state.vf = (source >> 7) & 0x01

# --- RND ---
# @intent:responsibility CXNN (RND Vx, byte) 命令をデコードします。
def decode_rnd(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.RND, "RND", [reg(field_x(opcode)), byte(field_nn(opcode))])

# @intent:responsibility ホスト提供の乱数バイトとNNの論理積をVxへ格納します。
def execute_rnd(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.v[op.x] = devices.random_source.next_byte() & op.nn
