# chip8_vm/peripherals/display.py
"""
64x32モノクロのフレームバッファ。

描画命令（DXYN）とクリア命令（00E0）からのみ変更されます。
"""
from typing import List, Sequence, Tuple

WIDTH = 64
HEIGHT = 32


# @intent:responsibility ピクセル状態を保持し、XORスプライト描画と衝突検出を提供します。
class Framebuffer:
    """
    CHIP-8の表示バッファ。各ピクセルはオン/オフの2値です。
    """
    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._pixels: List[List[bool]] = [[False] * width for _ in range(height)]

    # @intent:responsibility 全ピクセルをオフにします。
    def clear(self) -> None:
        for row in self._pixels:
            for x in range(self.width):
                row[x] = False

    # @intent:pre-condition 座標はバッファの範囲内である必要があります。
    def get_pixel(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} display.")
        return self._pixels[y][x]

    # @intent:responsibility 現在のフレーム全体を不変のタプルとして返します。
    def get_frame(self) -> Tuple[Tuple[bool, ...], ...]:
        return tuple(tuple(row) for row in self._pixels)

    def lit_count(self) -> int:
        return sum(sum(row) for row in self._pixels)

    # @intent:responsibility スプライトを(x, y)へXOR描画し、衝突の有無を返します。
    # @intent:rationale 描画原点は画面サイズで折り返す。右端・下端をはみ出した
    #                  ピクセルは標準では切り捨て、wrap=Trueの場合のみ反対側へ折り返す。
    def draw_sprite(self, x: int, y: int, sprite: Sequence[int], wrap: bool = False) -> bool:
        """
        spriteの各バイトを1行（MSBが左端）として描画します。
        既に点灯していたピクセルが消灯した場合にTrueを返します。
        """
        origin_x = x % self.width
        origin_y = y % self.height
        collision = False

        for row_offset, row_bits in enumerate(sprite):
            py = origin_y + row_offset
            if py >= self.height:
                if not wrap:
                    break
                py %= self.height
            row = self._pixels[py]
            for bit in range(8):
                if not (row_bits >> (7 - bit)) & 0x01:
                    continue
                px = origin_x + bit
                if px >= self.width:
                    if not wrap:
                        break
                    px %= self.width
                if row[px]:
                    collision = True
                row[px] = not row[px]

        return collision
