from chip8_vm.machine import Machine
from chip8_vm.peripherals.host import RandomSource, SeededRandomSource, SystemRandomSource
from .models import EmulatorConfig

# @intent:responsibility 構成（Config）に基づいて乱数源とクセ設定を選び、Machineを生成します。
class MachineBuilder:
    def build_machine(self, config: EmulatorConfig) -> Machine:
        return Machine(random_source=self.build_random_source(config), quirks=config.quirks)

    # @intent:rationale シードが指定された場合は再現可能な乱数源を、なければOSの乱数源を使用します。
    def build_random_source(self, config: EmulatorConfig) -> RandomSource:
        if config.seed is not None:
            return SeededRandomSource(config.seed)
        return SystemRandomSource()
