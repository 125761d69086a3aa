# chip8_vm/instructions/display.py
"""
画面命令（00E0, DXYN）の実装。
いずれもホストへの描画要求（draw-needed）としてTrueを返します。
"""
from chip8_vm.core.devices import Devices
from chip8_vm.core.snapshot import OpKind, Operation
from chip8_vm.core.state import Chip8State
from .base import field_n, field_x, field_y, make_operation, reg

# --- CLS ---
def decode_cls(opcode: int) -> Operation:
    return make_operation(opcode, OpKind.CLS, "CLS")

def execute_cls(state: Chip8State, devices: Devices, op: Operation) -> bool:
    devices.framebuffer.clear()
    return True

# --- DRW ---
# @intent:responsibility DXYN (DRW Vx, Vy, nibble) 命令をデコードします。
def decode_drw(opcode: int) -> Operation:
    return make_operation(
        opcode, OpKind.DRW, "DRW",
        [reg(field_x(opcode)), reg(field_y(opcode)), f"{field_n(opcode):X}"],
    )

# @intent:responsibility Iから読んだNバイトのスプライトを(Vx, Vy)へXOR描画し、衝突をVFへ設定します。
# @intent:pre-condition スプライト全体がメモリ内にあること。読み出しは描画より先に行うため、
#                      範囲外の場合フレームバッファとVFは変更されません。
def execute_drw(state: Chip8State, devices: Devices, op: Operation) -> bool:
    sprite = devices.memory.read_block(state.i, op.n)
    collision = devices.framebuffer.draw_sprite(
        state.v[op.x], state.v[op.y], sprite, wrap=devices.quirks.wrap_sprites
    )
    state.vf = 1 if collision else 0
    return True
