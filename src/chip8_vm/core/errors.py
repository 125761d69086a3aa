# chip8_vm/core/errors.py
"""
Core Layer (エラー定義)

コアが報告する回復可能なエラーの型階層を定義します。
いずれのエラーもプロセスを停止させず、ホストが停止・リセット・継続を選択します。
"""


# @intent:responsibility CHIP-8コアが報告する全エラーの基底クラス。
class Chip8Error(Exception):
    """
    コアの全エラーの基底クラス。ホストはこの型のみを捕捉すれば十分です。
    """


# @intent:responsibility 17段目のCALLでスタック容量を超えたことを報告します。
class StackOverflowError(Chip8Error):
    def __init__(self, capacity: int):
        super().__init__(f"Stack overflow: capacity of {capacity} return addresses exceeded.")
        self.capacity = capacity


# @intent:responsibility 空スタックでのRETを報告します。
class StackUnderflowError(Chip8Error):
    def __init__(self):
        super().__init__("Stack underflow: RET executed with an empty stack.")


# @intent:responsibility どの命令にも該当しないオペコードを報告します。
class UnknownOpcodeError(Chip8Error):
    def __init__(self, opcode: int):
        super().__init__(f"Unknown opcode: {opcode:#06x}")
        self.opcode = opcode


# @intent:responsibility 0xFFFを超えるメモリアクセスを報告します。
class MemoryOutOfBoundsError(Chip8Error):
    def __init__(self, address: int):
        super().__init__(f"Memory access out of bounds: {address:#06x}")
        self.address = address


# @intent:responsibility プログラム領域(0x200以降)に収まらないROMを報告します。
class RomTooLargeError(Chip8Error):
    def __init__(self, size: int, capacity: int):
        super().__init__(f"ROM of {size} bytes exceeds the {capacity} bytes available at 0x200.")
        self.size = size
        self.capacity = capacity
