# src/chip8_vm/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
引数を解析し、構成を読み込んでメインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from chip8_vm.config.loader import ConfigLoader
from chip8_vm.config.models import EmulatorConfig
from .main_window import MainWindow


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chip8-vm", description="An emulator for the CHIP-8 virtual machine")
    parser.add_argument("rom", nargs="?", help="Path to a CHIP-8 ROM (*.ch8)")
    parser.add_argument("-c", "--config", help="YAML emulator config")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for per-instruction DEBUG trace")
    return parser


# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None):
    args = build_arg_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = ConfigLoader().load_from_file(args.config) if args.config else EmulatorConfig()

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(config)
    main_win.show()
    if args.rom:
        main_win.load_rom_file(args.rom)
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
