# chip8_vm/instructions/load.py
"""
転送命令（レジスタ・インデックスレジスタ・メモリ・タイマー）の実装。
メモリへアクセスする命令は、状態を変更する前に範囲検証を完了させます。
"""
from chip8_vm.core.devices import Devices
from chip8_vm.core.snapshot import OpKind, Operation
from chip8_vm.core.state import Chip8State
from chip8_vm.transport.memory import FONT_GLYPH_SIZE, FONT_START
from .base import addr, byte, field_nn, field_nnn, field_x, make_operation, reg

# --- LD Vx, byte ---
# @intent:responsibility 6XNN (LD Vx, byte) 命令をデコードします。
def decode_ld_vx_nn(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_VX_NN, "LD", [reg(field_x(opcode)), byte(field_nn(opcode))])

def execute_ld_vx_nn(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.v[op.x] = op.nn

# --- LD I, addr ---
# @intent:responsibility ANNN (LD I, addr) 命令をデコードします。
def decode_ld_i(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_I, "LD", ["I", addr(field_nnn(opcode))])

def execute_ld_i(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.i = op.nnn

# --- ADD I, Vx ---
def decode_add_i_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.ADD_I_VX, "ADD", ["I", reg(field_x(opcode))])

# @intent:responsibility I += Vx。クセ設定が有効な場合、Iが0xFFFを超えるとVF=1。
def execute_add_i_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    result = state.i + state.v[op.x]
    state.i = result & 0xFFFF
    if devices.quirks.add_index_sets_vf:
        state.vf = 1 if result > 0x0FFF else 0

# --- LD F, Vx ---
def decode_ld_f_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_F_VX, "LD", ["F", reg(field_x(opcode))])

# @intent:responsibility Vxの下位ニブルに対応するフォントスプライトのアドレスをIに設定します。
def execute_ld_f_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.i = FONT_START + (state.v[op.x] & 0x0F) * FONT_GLYPH_SIZE

# --- LD B, Vx ---
def decode_ld_b_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_B_VX, "LD", ["B", reg(field_x(opcode))])

# @intent:responsibility Vxの10進表現（百・十・一の位）をI, I+1, I+2へ格納します。
def execute_ld_b_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    value = state.v[op.x]
    devices.memory.write_block(state.i, [value // 100, (value // 10) % 10, value % 10])

# --- LD [I], Vx ---
def decode_ld_i_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_I_VX, "LD", ["[I]", reg(field_x(opcode))])

# @intent:responsibility V0..Vxを I から順にメモリへ書き込みます。
def execute_ld_i_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    devices.memory.write_block(state.i, state.v[:op.x + 1])
    if devices.quirks.load_store_increments_index:
        state.i = (state.i + op.x + 1) & 0xFFFF

# --- LD Vx, [I] ---
def decode_ld_vx_i(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_VX_I, "LD", [reg(field_x(opcode)), "[I]"])

# @intent:responsibility I から順にメモリを読み出し V0..Vx へ格納します。
def execute_ld_vx_i(state: Chip8State, devices: Devices, op: Operation) -> None:
    data = devices.memory.read_block(state.i, op.x + 1)
    state.v[:op.x + 1] = list(data)
    if devices.quirks.load_store_increments_index:
        state.i = (state.i + op.x + 1) & 0xFFFF

# --- Timers ---
# @intent:responsibility タイマーの読み書き。書き込みは即時反映され、減算はタイマードライバのみが行います。
def decode_ld_vx_dt(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_VX_DT, "LD", [reg(field_x(opcode)), "DT"])

def execute_ld_vx_dt(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.v[op.x] = state.delay_timer

def decode_ld_dt_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_DT_VX, "LD", ["DT", reg(field_x(opcode))])

def execute_ld_dt_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.delay_timer = state.v[op.x]

def decode_ld_st_vx(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_ST_VX, "LD", ["ST", reg(field_x(opcode))])

def execute_ld_st_vx(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.sound_timer = state.v[op.x]
