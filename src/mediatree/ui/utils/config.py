'''Configuration management for UI state.'''
import json
from enum import StrEnum
from pathlib import Path
from typing import Any, Optional

# Classes
class Key(StrEnum):
    OUTPUT_PATH = 'output_path'
    ROOTS       = 'roots'
    SKIP        = 'skip'

class AppConfig:
    # Constants
    PATH = Path(__file__).parent.parent / 'config.json'
    TEMPLATE: dict[str, Any] = {
        Key.OUTPUT_PATH : None,
        Key.ROOTS       : [],
        Key.SKIP        : []
    }

    def __init__(self, data: dict[str, Any]) -> None:
        self.output_path : Optional[str] = data.get(Key.OUTPUT_PATH)
        self.roots       : list[str]     = AppConfig.parse_paths(data.get(Key.ROOTS))
        self.skip        : list[str]     = AppConfig.parse_paths(data.get(Key.SKIP))

    @staticmethod
    def parse_paths(value: Any) -> list[str]:
        '''Accepts either a list of paths or a newline-separated string, as edited in the UI.'''
        if not value:
            return []
        if isinstance(value, str):
            return [line.strip() for line in value.splitlines() if line.strip()]
        return [str(v) for v in value]

    def to_dict(self) -> dict[str, Any]:
        return {
            Key.OUTPUT_PATH : self.output_path,
            Key.ROOTS       : self.roots,
            Key.SKIP        : self.skip
        }

    @classmethod
    def load(cls) -> 'AppConfig':
        '''Load UI configuration from disk, creating it from the template if missing.'''
        if not cls.PATH.exists():
            cls.save(cls(cls.TEMPLATE))

        with open(cls.PATH, encoding='utf-8') as file:
            return cls(json.load(file))

    @classmethod
    def save(cls, config: 'AppConfig') -> None:
        '''Save UI configuration to disk.'''
        cls.PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(cls.PATH, 'w', encoding='utf-8') as file:
            json.dump(config.to_dict(), file, indent=2)
