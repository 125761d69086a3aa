# chip8_vm/core/quirks.py
"""
Core Layer (互換性設定)

歴史的なCHIP-8実装の間で挙動が分かれる命令の切り替えを定義します。
"""
from dataclasses import dataclass


# @intent:data_structure 歴史的なCHIP-8実装間で挙動が分かれる命令の切り替え。
# @intent:rationale 既定値は全てFalse（CHIP-48/SUPER-CHIP系の一般的な解釈）とする。
@dataclass(frozen=True)
class Quirks:
    shift_uses_vy: bool = False  # 8XY6/8XYE: Vyをシフトした結果をVxへ格納
    add_index_sets_vf: bool = False  # FX1E: Iが0xFFFを超えたらVF=1
    jump_with_vx: bool = False  # BNNN: V0ではなくVx(Xは上位ニブル)を加算
    load_store_increments_index: bool = False  # FX55/FX65: 実行後 I += X + 1
    logic_resets_vf: bool = False  # 8XY1/8XY2/8XY3: VFを0にリセット
    wrap_sprites: bool = False  # DXYN: 画面端をはみ出したピクセルを折り返す
