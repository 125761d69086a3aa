# src/chip8_vm/ui/display_view.py
"""
フレームバッファを拡大表示するウィジェット。
"""
from typing import Optional, Sequence, Tuple

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent

from chip8_vm.config.models import DisplayConfig
from chip8_vm.peripherals.display import HEIGHT, WIDTH

Frame = Tuple[Tuple[bool, ...], ...]


# @intent:responsibility 64x32のピクセル状態を指定倍率の矩形として描画します。
class DisplayView(QWidget):
    def __init__(self, config: Optional[DisplayConfig] = None, parent=None):
        super().__init__(parent)
        self._config = config or DisplayConfig()
        self._foreground = QColor(self._config.foreground)
        self._background = QColor(self._config.background)
        self._frame: Frame = tuple(tuple([False] * WIDTH) for _ in range(HEIGHT))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(WIDTH * 2, HEIGHT * 2)

    @property
    def frame(self) -> Frame:
        return self._frame

    def sizeHint(self) -> QSize:
        return QSize(WIDTH * self._config.scale, HEIGHT * self._config.scale)

    # @intent:responsibility 表示するフレームを差し替え、再描画を要求します。
    def set_frame(self, frame: Sequence[Sequence[bool]]) -> None:
        self._frame = tuple(tuple(row) for row in frame)
        self.update()

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)

        # ウィジェットのサイズに合わせて整数倍率で中央に配置する
        scale = max(1, min(self.width() // WIDTH, self.height() // HEIGHT))
        offset_x = (self.width() - WIDTH * scale) // 2
        offset_y = (self.height() - HEIGHT * scale) // 2

        for y, row in enumerate(self._frame):
            for x, lit in enumerate(row):
                if lit:
                    painter.fillRect(offset_x + x * scale, offset_y + y * scale, scale, scale, self._foreground)
        painter.end()
