from dataclasses import dataclass, field
from typing import Dict, Optional

from chip8_vm.core.quirks import Quirks
from chip8_vm.core.timers import TIMER_HZ

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#33FF66"
    background: str = "#101010"

@dataclass
class EmulatorConfig:
    cycles_per_second: int = 700
    timer_hz: int = TIMER_HZ
    seed: Optional[int] = None  # Noneの場合はOSの乱数源を使用
    quirks: Quirks = field(default_factory=Quirks)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    key_map: Dict[str, int] = field(default_factory=dict)  # 空の場合はUIの既定マップを使用
