# chip8_vm/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
実行時点でstate.pcは既に次の命令（現在のPC+2）を指しています。
"""
import logging

from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import StackOverflowError, StackUnderflowError
from chip8_vm.core.snapshot import OpKind, Operation
from chip8_vm.core.state import STACK_CAPACITY, Chip8State
from .base import addr, byte, field_nn, field_nnn, field_x, field_y, make_operation, reg

logger = logging.getLogger(__name__)

INSTRUCTION_SIZE = 2


# @intent:utility_function 次の命令を1つ読み飛ばします。
def _skip(state: Chip8State) -> None:
    state.pc = (state.pc + INSTRUCTION_SIZE) & 0xFFFF

# --- SYS ---
# @intent:responsibility 0NNN (SYS addr) 命令をデコードします。
def decode_sys(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SYS, "SYS", [addr(field_nnn(opcode))])

# @intent:responsibility 機械語ルーチン呼び出し。実機依存のため無視して次へ進みます。
def execute_sys(state: Chip8State, devices: Devices, op: Operation) -> None:
    logger.debug("Ignoring SYS %03X", op.nnn)

# --- JP ---
def decode_jp(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.JP, "JP", [addr(field_nnn(opcode))])

def execute_jp(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.pc = op.nnn

# --- JP V0, addr ---
# @intent:responsibility BNNN 命令をデコードします。
def decode_jp_v0(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.JP_V0, "JP", ["V0", addr(field_nnn(opcode))])

# @intent:responsibility NNN + V0 へジャンプします。クセ設定が有効ならV0の代わりにVx（Xは上位ニブル）を使用します。
def execute_jp_v0(state: Chip8State, devices: Devices, op: Operation) -> None:
    offset = state.v[op.x] if devices.quirks.jump_with_vx else state.v[0]
    state.pc = (op.nnn + offset) & 0xFFFF

# --- CALL ---
# @intent:responsibility 2NNN (CALL addr) 命令をデコードします。
def decode_call(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.CALL, "CALL", [addr(field_nnn(opcode))])

# @intent:responsibility 戻りアドレス（CALLの次の命令）をプッシュしてからジャンプします。
# @intent:pre-condition スタックに空きがあること。容量チェックはプッシュより先に行います。
def execute_call(state: Chip8State, devices: Devices, op: Operation) -> None:
    if len(state.stack) >= STACK_CAPACITY:
        raise StackOverflowError(STACK_CAPACITY)
    state.stack.append(state.pc)
    state.pc = op.nnn

# --- RET ---
def decode_ret(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.RET, "RET")

# @intent:responsibility スタックから戻りアドレスをポップしてPCに設定します。
def execute_ret(state: Chip8State, devices: Devices, op: Operation) -> None:
    if not state.stack:
        raise StackUnderflowError()
    state.pc = state.stack.pop()

# --- SE / SNE ---
def decode_se_vx_nn(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SE_VX_NN, "SE", [reg(field_x(opcode)), byte(field_nn(opcode))])

def execute_se_vx_nn(state: Chip8State, devices: Devices, op: Operation) -> None:
    if state.v[op.x] == op.nn:
        _skip(state)

def decode_sne_vx_nn(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SNE_VX_NN, "SNE", [reg(field_x(opcode)), byte(field_nn(opcode))])

def execute_sne_vx_nn(state: Chip8State, devices: Devices, op: Operation) -> None:
    if state.v[op.x] != op.nn:
        _skip(state)

def decode_se_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SE_VX_VY, "SE", [reg(field_x(opcode)), reg(field_y(opcode))])

def execute_se_vx_vy(state: Chip8State, devices: Devices, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        _skip(state)

def decode_sne_vx_vy(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SNE_VX_VY, "SNE", [reg(field_x(opcode)), reg(field_y(opcode))])

def execute_sne_vx_vy(state: Chip8State, devices: Devices, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        _skip(state)
