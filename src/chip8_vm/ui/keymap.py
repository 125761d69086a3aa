"""
キーボード→CHIP-8キーパッドの対応表。

CHIP-8の4x4キーパッドを、一般的なキーボード左側の4x4ブロックへ割り当てます。

    1 2 3 C        1 2 3 4
    4 5 6 D   <-   Q W E R
    7 8 9 E        A S D F
    A 0 B F        Z X C V
"""
from typing import Dict, Mapping, Optional

from PySide6.QtCore import Qt

DEFAULT_KEY_MAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}


# @intent:responsibility 既定の対応表に、構成ファイルで指定された上書きを適用します。
def merge_key_map(overrides: Optional[Mapping[str, int]] = None) -> Dict[str, int]:
    key_map = dict(DEFAULT_KEY_MAP)
    for name, code in (overrides or {}).items():
        key_map[name.upper()] = code
    return key_map


def _key_value(key) -> int:
    return int(key.value) if hasattr(key, "value") else int(key)


# @intent:responsibility キー名の対応表をQtのキーコード（int）からの対応表へ変換します。
# @intent:post-condition Qtに存在しないキー名はValueErrorとして報告します。
def build_qt_key_map(key_map: Mapping[str, int]) -> Dict[int, int]:
    qt_map: Dict[int, int] = {}
    for name, code in key_map.items():
        qt_key = getattr(Qt.Key, f"Key_{name}", None)
        if qt_key is None:
            raise ValueError(f"Unknown keyboard key name: {name}")
        qt_map[_key_value(qt_key)] = code
    return qt_map
