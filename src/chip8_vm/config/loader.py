import logging
import yaml
from dataclasses import fields
from typing import Dict, Any
from chip8_vm.core.quirks import Quirks
from chip8_vm.core.timers import TIMER_HZ
from .models import EmulatorConfig, DisplayConfig

logger = logging.getLogger(__name__)

class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.info("Loaded emulator config from %s", path)
        return self.parse_config(data or {})

    def parse_config(self, data: Dict[str, Any]) -> EmulatorConfig:
        if not isinstance(data, dict):
            raise ValueError("Config root must be a mapping.")

        cycles_per_second = self._parse_int(data.get("cycles_per_second", 700), "cycles_per_second")
        timer_hz = self._parse_int(data.get("timer_hz", TIMER_HZ), "timer_hz")
        if cycles_per_second <= 0 or timer_hz <= 0:
            raise ValueError("cycles_per_second and timer_hz must be positive.")

        seed = data.get("seed")
        if seed is not None:
            seed = self._parse_int(seed, "seed")

        return EmulatorConfig(
            cycles_per_second=cycles_per_second,
            timer_hz=timer_hz,
            seed=seed,
            quirks=self._parse_quirks(data.get("quirks") or {}),
            display=self._parse_display(data.get("display") or {}),
            key_map=self._parse_key_map(data.get("key_map") or {}),
        )

    def _parse_quirks(self, data: Dict[str, Any]) -> Quirks:
        known = {f.name for f in fields(Quirks)}
        values = {}
        for name, value in data.items():
            if name not in known:
                raise ValueError(f"Unknown quirk: {name}")
            if not isinstance(value, bool):
                raise ValueError(f"Quirk '{name}' must be true or false, got {value!r}")
            values[name] = value
        return Quirks(**values)

    def _parse_display(self, data: Dict[str, Any]) -> DisplayConfig:
        scale = self._parse_int(data.get("scale", 10), "display.scale")
        if scale <= 0:
            raise ValueError("display.scale must be positive.")
        return DisplayConfig(
            scale=scale,
            foreground=str(data.get("foreground", DisplayConfig.foreground)),
            background=str(data.get("background", DisplayConfig.background)),
        )

    def _parse_key_map(self, data: Dict[str, Any]) -> Dict[str, int]:
        key_map = {}
        for key_name, code in data.items():
            value = self._parse_int(code, f"key_map.{key_name}")
            if not 0 <= value <= 0xF:
                raise ValueError(f"key_map.{key_name} must be in 0x0-0xF, got {value:#x}")
            key_map[str(key_name).upper()] = value
        return key_map

    def _parse_int(self, value: Any, name: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format for {name}: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ValueError(f"Invalid integer format for {name}: {value}")
