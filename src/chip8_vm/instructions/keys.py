# chip8_vm/instructions/keys.py
"""
入力命令（EX9E, EXA1, FX0A）の実装。
"""
from chip8_vm.core.devices import Devices
from chip8_vm.core.snapshot import OpKind, Operation
from chip8_vm.core.state import Chip8State
from .base import field_x, make_operation, reg
from .control import INSTRUCTION_SIZE


def decode_skp(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SKP, "SKP", [reg(field_x(opcode))])

# @intent:responsibility Vxの下位ニブルのキーが押されていれば次の命令をスキップします。
def execute_skp(state: Chip8State, devices: Devices, op: Operation) -> None:
    if devices.keypad.is_pressed(state.v[op.x] & 0x0F):
        state.pc = (state.pc + INSTRUCTION_SIZE) & 0xFFFF

def decode_sknp(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.SKNP, "SKNP", [reg(field_x(opcode))])

def execute_sknp(state: Chip8State, devices: Devices, op: Operation) -> None:
    if not devices.keypad.is_pressed(state.v[op.x] & 0x0F):
        state.pc = (state.pc + INSTRUCTION_SIZE) & 0xFFFF

# --- LD Vx, K ---
def decode_ld_vx_k(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.LD_VX_K, "LD", [reg(field_x(opcode)), "K"])

# @intent:responsibility キー待ち状態に入ります。
# @intent:rationale ここでは待機せず、書き込み先レジスタを記録するだけ。ホストがキーを報告すると
#                  Vxへ書き込まれ、次のサイクルからFX0Aの次の命令が実行されます。
def execute_ld_vx_k(state: Chip8State, devices: Devices, op: Operation) -> None:
    state.awaiting_key = op.x
