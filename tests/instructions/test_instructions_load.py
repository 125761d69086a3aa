import unittest

from chip8_vm.core.quirks import Quirks
from chip8_vm.core.cpu import Chip8Cpu
from chip8_vm.core.devices import Devices
from chip8_vm.core.errors import MemoryOutOfBoundsError
from chip8_vm.transport.memory import FONT_GLYPH_SIZE, FONT_SPRITES, FONT_START


class TestChip8LoadInstructions(unittest.TestCase):
    quirks = Quirks()

    def setUp(self):
        self.devices = Devices(quirks=self.quirks)
        self.cpu = Chip8Cpu(self.devices)
        self.state = self.cpu.get_state()
        self.memory = self.devices.memory

    def _execute(self, opcode):
        self.memory.write_block(self.state.pc, [opcode >> 8, opcode & 0xFF])
        return self.cpu.step()

    def test_ld_vx_nn_and_ld_i(self):
        self._execute(0x6A42)
        self._execute(0xA123)
        self.assertEqual(self.state.v[0xA], 0x42)
        self.assertEqual(self.state.i, 0x123)

    def test_add_i_vx_leaves_vf_by_default(self):
        self.state.i = 0x0FFF
        self.state.v[0] = 0x02
        self.state.vf = 0x05
        self._execute(0xF01E)
        self.assertEqual(self.state.i, 0x1001)
        self.assertEqual(self.state.vf, 0x05)

    def test_ld_f_vx_points_at_font_glyph(self):
        self.state.v[2] = 0x1A  # 下位ニブルのみ使用
        self._execute(0xF229)
        self.assertEqual(self.state.i, FONT_START + 0xA * FONT_GLYPH_SIZE)
        glyph = self.memory.read_block(self.state.i, FONT_GLYPH_SIZE)
        self.assertEqual(glyph, FONT_SPRITES[0xA * 5:0xA * 5 + 5])

    def test_ld_b_vx_stores_bcd(self):
        self.state.v[0] = 254
        self.state.i = 0x300
        self._execute(0xF033)
        self.assertEqual(self.memory.read_block(0x300, 3), bytes([2, 5, 4]))
        self.assertEqual(self.state.i, 0x300)

    def test_store_and_load_registers(self):
        self.state.v[0:4] = [0x11, 0x22, 0x33, 0x44]
        self.state.i = 0x400
        self._execute(0xF355)
        self.assertEqual(self.memory.read_block(0x400, 5), bytes([0x11, 0x22, 0x33, 0x44, 0x00]))
        self.assertEqual(self.state.i, 0x400)

        self.state.v[0:4] = [0, 0, 0, 0]
        self._execute(0xF265)
        self.assertEqual(self.state.v[0:4], [0x11, 0x22, 0x33, 0x00])
        self.assertEqual(self.state.i, 0x400)

    def test_store_out_of_bounds_is_atomic(self):
        self.state.v[0:4] = [1, 2, 3, 4]
        self.state.i = 0xFFE
        with self.assertRaises(MemoryOutOfBoundsError):
            self._execute(0xF355)
        self.assertEqual(self.memory.read_block(0xFFE, 2), bytes([0, 0]))
        self.assertEqual(self.state.pc, 0x200)

    def test_bcd_out_of_bounds(self):
        self.state.i = 0xFFF
        with self.assertRaises(MemoryOutOfBoundsError):
            self._execute(0xF033)
        self.assertEqual(self.memory.read(0xFFF), 0)

    def test_timer_registers(self):
        self.state.v[1] = 30
        self._execute(0xF115)
        self._execute(0xF118)
        self.assertEqual(self.state.delay_timer, 30)
        self.assertEqual(self.state.sound_timer, 30)
        self._execute(0xF207)
        self.assertEqual(self.state.v[2], 30)


class TestChip8LoadQuirks(unittest.TestCase):
    def setUp(self):
        self.devices = Devices(quirks=Quirks(add_index_sets_vf=True, load_store_increments_index=True))
        self.cpu = Chip8Cpu(self.devices)
        self.state = self.cpu.get_state()

    def _execute(self, opcode):
        self.devices.memory.write_block(self.state.pc, [opcode >> 8, opcode & 0xFF])
        return self.cpu.step()

    def test_add_i_vx_sets_vf_on_overflow(self):
        self.state.i = 0x0FFF
        self.state.v[0] = 0x01
        self._execute(0xF01E)
        self.assertEqual(self.state.vf, 1)

        self.state.i = 0x0100
        self._execute(0xF01E)
        self.assertEqual(self.state.vf, 0)

    def test_load_store_increments_index(self):
        self.state.i = 0x400
        self._execute(0xF255)
        self.assertEqual(self.state.i, 0x403)
        self._execute(0xF065)
        self.assertEqual(self.state.i, 0x404)
