# chip8_vm/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import UnknownOpcodeError
from chip8_vm.core.snapshot import Operation
from chip8_vm.core.state import Chip8State
from .base import decode_unknown
from .maps import (
    ALU_DECODE_MAP, COMPARE_DECODE_MAP, EXECUTE_MAP, GROUP_DECODE_MAP,
    KEY_DECODE_MAP, MISC_DECODE_MAP, SYSTEM_DECODE_MAP,
)
from .control import decode_sys

# @intent:responsibility 16ビットのオペコードをデコードします。
# @intent:rationale 副作用のない純粋関数。どの命令にも該当しない場合はUNKNOWNの記述子を返し、
#                  誤った命令へ黙って割り当てることはしません。
def decode_opcode(opcode: int) -> Operation:
    """
    CHIP-8のオペコードをデコードし、Operationオブジェクトを返します。
    """
    if not 0 <= opcode <= 0xFFFF:
        raise ValueError(f"Opcode {opcode} is not a 16-bit value.")

    group = opcode >> 12
    decoder = GROUP_DECODE_MAP.get(group)
    if decoder:
        return decoder(opcode)

    if group == 0x0:
        return SYSTEM_DECODE_MAP.get(opcode & 0x0FFF, decode_sys)(opcode)
    if group in COMPARE_DECODE_MAP:
        decoder = COMPARE_DECODE_MAP[group] if (opcode & 0x000F) == 0 else None
    elif group == 0x8:
        decoder = ALU_DECODE_MAP.get(opcode & 0x000F)
    elif group == 0xE:
        decoder = KEY_DECODE_MAP.get(opcode & 0x00FF)
    elif group == 0xF:
        decoder = MISC_DECODE_MAP.get(opcode & 0x00FF)

    if decoder:
        return decoder(opcode)
    return decode_unknown(opcode)

# @intent:responsibility デコードされたCHIP-8命令を実行します。
# @intent:return 描画要求があった場合にTrue。
def execute_instruction(operation: Operation, state: Chip8State, devices: Devices) -> bool:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    UNKNOWN命令はUnknownOpcodeErrorとして報告します。
    """
    executor = EXECUTE_MAP.get(operation.kind)
    if executor is None:
        raise UnknownOpcodeError(operation.opcode)
    return bool(executor(state, devices, operation))
