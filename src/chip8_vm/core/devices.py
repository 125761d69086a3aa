# chip8_vm/core/devices.py
"""
命令実行時に参照される周辺装置の束。
"""
from dataclasses import dataclass, field

from chip8_vm.core.quirks import Quirks
from chip8_vm.peripherals.display import Framebuffer
from chip8_vm.peripherals.host import RandomSource, SystemRandomSource
from chip8_vm.peripherals.keypad import Keypad
from chip8_vm.transport.memory import Memory


# @intent:data_structure 実行関数へ渡す、レジスタ以外のマシン構成要素。
# @intent:rationale 実行関数のシグネチャを (state, devices, op) に統一するためにまとめる。
@dataclass
class Devices:
    memory: Memory = field(default_factory=Memory)
    framebuffer: Framebuffer = field(default_factory=Framebuffer)
    keypad: Keypad = field(default_factory=Keypad)
    random_source: RandomSource = field(default_factory=SystemRandomSource)
    quirks: Quirks = field(default_factory=Quirks)
