"""
オペコードと命令実装のマッピング定義。
"""
from chip8_vm.core.snapshot import OpKind
from . import alu
from . import control
from . import display
from . import keys
from . import load

# @intent:map 先頭ニブルだけで命令が確定するグループのデコード関数。
GROUP_DECODE_MAP = {
    0x1: control.decode_jp,
    0x2: control.decode_call,
    0x3: control.decode_se_vx_nn,
    0x4: control.decode_sne_vx_nn,
    0x6: load.decode_ld_vx_nn,
    0x7: alu.decode_add_vx_nn,
    0xA: load.decode_ld_i,
    0xB: control.decode_jp_v0,
    0xC: alu.decode_rnd,
    0xD: display.decode_drw,
}

# @intent:map 0x0グループ: 下位12ビットで識別。該当しなければSYS。
SYSTEM_DECODE_MAP = {
    0x0E0: display.decode_cls,
    0x0EE: control.decode_ret,
}

# @intent:map 0x5/0x9グループ: 末尾ニブルが0のみ有効。
COMPARE_DECODE_MAP = {
    0x5: control.decode_se_vx_vy,
    0x9: control.decode_sne_vx_vy,
}

# @intent:map 0x8グループ: 末尾ニブルで識別。
ALU_DECODE_MAP = {
    0x0: alu.decode_ld_vx_vy,
    0x1: alu.decode_or,
    0x2: alu.decode_and,
    0x3: alu.decode_xor,
    0x4: alu.decode_add_vx_vy,
    0x5: alu.decode_sub,
    0x6: alu.decode_shr,
    0x7: alu.decode_subn,
    0xE: alu.decode_shl,
}

# @intent:map 0xEグループ: 下位バイトで識別。
KEY_DECODE_MAP = {
    0x9E: keys.decode_skp,
    0xA1: keys.decode_sknp,
}

# @intent:map 0xFグループ: 下位バイトで識別。
MISC_DECODE_MAP = {
    0x07: load.decode_ld_vx_dt,
    0x0A: keys.decode_ld_vx_k,
    0x15: load.decode_ld_dt_vx,
    0x18: load.decode_ld_st_vx,
    0x1E: load.decode_add_i_vx,
    0x29: load.decode_ld_f_vx,
    0x33: load.decode_ld_b_vx,
    0x55: load.decode_ld_i_vx,
    0x65: load.decode_ld_vx_i,
}

# @intent:map 命令種別から実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    OpKind.SYS: control.execute_sys,
    OpKind.RET: control.execute_ret,
    OpKind.JP: control.execute_jp,
    OpKind.CALL: control.execute_call,
    OpKind.SE_VX_NN: control.execute_se_vx_nn,
    OpKind.SNE_VX_NN: control.execute_sne_vx_nn,
    OpKind.SE_VX_VY: control.execute_se_vx_vy,
    OpKind.SNE_VX_VY: control.execute_sne_vx_vy,
    OpKind.JP_V0: control.execute_jp_v0,

    # ALU
    OpKind.ADD_VX_NN: alu.execute_add_vx_nn,
    OpKind.LD_VX_VY: alu.execute_ld_vx_vy,
    OpKind.OR: alu.execute_or,
    OpKind.AND: alu.execute_and,
    OpKind.XOR: alu.execute_xor,
    OpKind.ADD_VX_VY: alu.execute_add_vx_vy,
    OpKind.SUB: alu.execute_sub,
    OpKind.SHR: alu.execute_shr,
    OpKind.SUBN: alu.execute_subn,
    OpKind.SHL: alu.execute_shl,
    OpKind.RND: alu.execute_rnd,

    # Load/Store
    OpKind.LD_VX_NN: load.execute_ld_vx_nn,
    OpKind.LD_I: load.execute_ld_i,
    OpKind.ADD_I_VX: load.execute_add_i_vx,
    OpKind.LD_F_VX: load.execute_ld_f_vx,
    OpKind.LD_B_VX: load.execute_ld_b_vx,
    OpKind.LD_I_VX: load.execute_ld_i_vx,
    OpKind.LD_VX_I: load.execute_ld_vx_i,
    OpKind.LD_VX_DT: load.execute_ld_vx_dt,
    OpKind.LD_DT_VX: load.execute_ld_dt_vx,
    OpKind.LD_ST_VX: load.execute_ld_st_vx,

    # Display
    OpKind.CLS: display.execute_cls,
    OpKind.DRW: display.execute_drw,

    # Input
    OpKind.SKP: keys.execute_skp,
    OpKind.SKNP: keys.execute_sknp,
    OpKind.LD_VX_K: keys.execute_ld_vx_k,
}
