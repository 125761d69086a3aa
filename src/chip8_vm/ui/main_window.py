# src/chip8_vm/ui/main_window.py
"""
メインウィンドウの実装。
ホストとしてマシンを保持し、QTimerによるフレーム駆動、キー入力の転送、
画面とサウンドの出力を行います。
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QApplication, QFileDialog, QMessageBox, QLabel
from PySide6.QtGui import QAction, QCloseEvent, QKeyEvent, QPalette, QColor
from PySide6.QtCore import QTimer, Slot

from chip8_vm.config.builder import MachineBuilder
from chip8_vm.config.models import EmulatorConfig
from chip8_vm.core.errors import Chip8Error
from chip8_vm.host.runner import FrameRunner
from chip8_vm.loader.rom_loader import RomLoader
from chip8_vm.peripherals.display import Framebuffer
from chip8_vm.peripherals.host import MachineObserver
from .display_view import DisplayView
from .keymap import build_qt_key_map, merge_key_map

logger = logging.getLogger(__name__)


# @intent:responsibility マシンからの通知を画面表示とビープ音へ変換します。
class WindowObserver(MachineObserver):
    def __init__(self, window: 'MainWindow'):
        self._window = window

    def on_frame(self, framebuffer: Framebuffer) -> None:
        self._window.display_view.set_frame(framebuffer.get_frame())

    def on_sound(self, active: bool) -> None:
        self._window.set_sound_indicator(active)
        if active:
            QApplication.beep()


# @intent:responsibility アプリケーションのメインウィンドウを定義し、エミュレーションを駆動します。
class MainWindow(QMainWindow):
    def __init__(self, config: Optional[EmulatorConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self._config = config or EmulatorConfig()
        self._rom_data: Optional[bytes] = None
        self._rom_name = ""

        self.setWindowTitle("CHIP-8")
        self._setup_backend()
        self._set_dark_theme()
        self._create_display()
        self._create_menus()
        self._create_status_bar()

        self._timer = QTimer(self)
        self._timer.setInterval(self.runner.frame_interval_ms)
        self._timer.timeout.connect(self._run_frame)

    # @intent:responsibility 構成からマシンとフレームランナーを生成します。
    def _setup_backend(self):
        self.machine = MachineBuilder().build_machine(self._config)
        self.runner = FrameRunner(self.machine, self._config.cycles_per_second, self._config.timer_hz)
        self._qt_key_map = build_qt_key_map(merge_key_map(self._config.key_map))

    def _create_display(self):
        self.display_view = DisplayView(self._config.display, self)
        self.setCentralWidget(self.display_view)
        self.machine.add_observer(WindowObserver(self))
        self.resize(self.display_view.sizeHint())

    def _create_menus(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")

        self.open_action = QAction("Open ROM...", self)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(self._open_rom_dialog)
        file_menu.addAction(self.open_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self.reset_rom)
        file_menu.addAction(self.reset_action)

        self.pause_action = QAction("Pause", self)
        self.pause_action.setShortcut("Ctrl+P")
        self.pause_action.setCheckable(True)
        self.pause_action.toggled.connect(self._set_paused)
        file_menu.addAction(self.pause_action)

        file_menu.addSeparator()
        quit_action = QAction("Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    def _create_status_bar(self):
        self.sound_label = QLabel("")
        self.statusBar().addPermanentWidget(self.sound_label)
        self.statusBar().showMessage("No ROM loaded")

    def set_sound_indicator(self, active: bool) -> None:
        self.sound_label.setText("BEEP" if active else "")

    # --- ROM ---
    # @intent:responsibility ROMファイルを読み込み、実行を開始します。
    def load_rom_file(self, file_name: str) -> bool:
        try:
            data = RomLoader().read_file(file_name)
            self.machine.load_rom(data)
        except (OSError, Chip8Error) as e:
            logger.error("Failed to load ROM %s: %s", file_name, e)
            QMessageBox.critical(self, "Error", f"Failed to load ROM: {e}")
            return False

        self._rom_data = data
        self._rom_name = file_name
        self.runner.resume()
        self.statusBar().showMessage(f"Running {file_name}")
        if not self.pause_action.isChecked():
            self._timer.start()
        return True

    @Slot()
    def _open_rom_dialog(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open CHIP-8 ROM", "", "CHIP-8 ROMs (*.ch8 *.c8);;All Files (*)")
        if file_name:
            self.load_rom_file(file_name)

    # @intent:responsibility 直前に読み込んだROMで完全に再初期化します。
    @Slot()
    def reset_rom(self):
        if self._rom_data is None:
            return
        self.machine.load_rom(self._rom_data)
        self.runner.resume()
        self.statusBar().showMessage(f"Running {self._rom_name}")
        if not self.pause_action.isChecked():
            self._timer.start()

    @Slot(bool)
    def _set_paused(self, paused: bool):
        if paused:
            self._timer.stop()
            self.statusBar().showMessage("Paused")
        elif self._rom_data is not None:
            self._timer.start()
            self.statusBar().showMessage(f"Running {self._rom_name}")

    # --- 実行 ---
    @Slot()
    def _run_frame(self):
        report = self.runner.run_frame()
        if report.error is not None:
            self._timer.stop()
            self.statusBar().showMessage(f"Halted: {report.error}")

    # --- 入力 ---
    # @intent:responsibility キー押下をキーラッチへ反映し、FX0Aのキー待ちを解決します。
    def keyPressEvent(self, event: QKeyEvent):
        code = self._qt_key_map.get(int(event.key()))
        if code is None or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self.machine.set_key_state(code, True)
        self.machine.report_key_pressed(code)

    def keyReleaseEvent(self, event: QKeyEvent):
        code = self._qt_key_map.get(int(event.key()))
        if code is None or event.isAutoRepeat():
            super().keyReleaseEvent(event)
            return
        self.machine.set_key_state(code, False)

    def _set_dark_theme(self):
        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(29, 29, 29))
        dark_palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Base, QColor(30, 30, 30))
        dark_palette.setColor(QPalette.Text, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
        QApplication.setPalette(dark_palette)

    # @intent:responsibility ウィンドウ終了時にフレーム駆動を停止します。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        event.accept()
