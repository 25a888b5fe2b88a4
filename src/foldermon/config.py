from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, TypedDict, cast

import yaml


class RawAppConfig(TypedDict):
    root_path: str
    log_level: str


class RawConfigFile(TypedDict):
    config: RawAppConfig


CONFIG_FILENAME: Path = Path("foldermon.yaml")
DEFAULT_ROOT: Path = Path("test_folder")
DEFAULT_LOG_LEVEL: str = "WARNING"


def type_error(value: object) -> NoReturn:
    raise TypeError(f"Unexpected value of wrong type: {value!r}")


@dataclass(slots=True)
class AppConfig:
    root_path: Path = DEFAULT_ROOT
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def load(path: Path = CONFIG_FILENAME) -> "AppConfig":
        if not path.exists():
            raise FileNotFoundError("Missing config file. Run foldermon init first.")

        with path.open("r", encoding="UTF-8") as f:
            raw_loaded_obj: object | None = cast(object, yaml.safe_load(f))

        if not raw_loaded_obj:
            raise ValueError("Config file is empty or invalid YAML.")

        if not isinstance(raw_loaded_obj, dict):
            type_error(raw_loaded_obj)

        raw_dict: dict[str, object] = cast(dict[str, object], raw_loaded_obj)

        cfg_raw: object | None = raw_dict.get("config")
        if not isinstance(cfg_raw, dict):
            type_error(cfg_raw)

        cfg: RawAppConfig = cast(RawAppConfig, cast(object, cfg_raw))

        root_path: object = cfg.get("root_path", str(DEFAULT_ROOT))
        if not isinstance(root_path, str):
            type_error(root_path)

        log_level: object = cfg.get("log_level", DEFAULT_LOG_LEVEL)
        if not isinstance(log_level, str):
            type_error(log_level)

        return AppConfig(root_path=Path(root_path), log_level=log_level.upper())

    def save(self, path: Path = CONFIG_FILENAME) -> None:
        raw: RawConfigFile = {"config": self.to_raw()}
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(raw, f, sort_keys=False)

    def to_raw(self) -> RawAppConfig:
        return {
            "root_path": str(self.root_path),
            "log_level": self.log_level,
        }
