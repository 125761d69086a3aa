# chip8_vm/peripherals/host.py
"""
ホスト能力インターフェース

コアが組み込み先（ホスト）に要求する能力を定義します。
乱数源は必須、フレーム/サウンドの変化通知は任意です。
"""
import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from chip8_vm.peripherals.display import Framebuffer


# @intent:responsibility CXNN命令が使用する乱数バイトの供給元を定義します。
class RandomSource(ABC):
    """
    0-255の擬似乱数バイトを1つずつ返す乱数源の抽象基底クラス。
    """
    @abstractmethod
    def next_byte(self) -> int:
        pass


# @intent:responsibility OSのエントロピーに基づく乱数源を提供します。
class SystemRandomSource(RandomSource):
    def __init__(self):
        self._rng = random.SystemRandom()

    def next_byte(self) -> int:
        return self._rng.randrange(256)


# @intent:responsibility シード固定で再現可能な乱数源を提供します。
class SeededRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_byte(self) -> int:
        return self._rng.randrange(256)


# @intent:responsibility 与えられたバイト列を順に繰り返し返します。テストのリプレイ用。
class SequenceRandomSource(RandomSource):
    def __init__(self, values: Iterable[int]):
        self._values = [v & 0xFF for v in values]
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value.")
        self._index = 0

    def next_byte(self) -> int:
        value = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        return value


# @intent:responsibility フレームバッファとサウンド状態の変化をホストへ通知します。
class MachineObserver:
    """
    任意のオブザーバ。必要なメソッドだけをオーバーライドします。
    """
    def on_frame(self, framebuffer: Framebuffer) -> None:
        # Intentional: default observer ignores frame updates.
        pass

    def on_sound(self, active: bool) -> None:
        # Intentional: default observer ignores sound changes.
        pass
