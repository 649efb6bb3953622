from __future__ import annotations
import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_PAD_FRACTION = 0.05
DEFAULT_ZOOM_IN_FACTOR = 0.85
DEFAULT_ZOOM_OUT_FACTOR = 1.15


@dataclass
class Config:
    default_load_folder: str = ""
    default_save_folder: str = ""
    config_folder: str = ""
    config_filename: str = "settings.json"
    # parsing and interaction tuning
    delimiter: str = DEFAULT_DELIMITER
    pad_fraction: float = DEFAULT_PAD_FRACTION
    zoom_in_factor: float = DEFAULT_ZOOM_IN_FACTOR
    zoom_out_factor: float = DEFAULT_ZOOM_OUT_FACTOR

    def __post_init__(self):
        # ensure folders are normalized strings
        self.default_load_folder = str(self.default_load_folder or "")
        self.default_save_folder = str(self.default_save_folder or "")
        self.config_folder = str(self.config_folder or "")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1 or self.delimiter in '"\r\n':
            logger.warning("Invalid delimiter %r in config; using %r", self.delimiter, DEFAULT_DELIMITER)
            self.delimiter = DEFAULT_DELIMITER
        self.pad_fraction = _positive_float(self.pad_fraction, DEFAULT_PAD_FRACTION)
        self.zoom_in_factor = _positive_float(self.zoom_in_factor, DEFAULT_ZOOM_IN_FACTOR)
        self.zoom_out_factor = _positive_float(self.zoom_out_factor, DEFAULT_ZOOM_OUT_FACTOR)

    @property
    def config_path(self) -> Path:
        return Path(self.config_folder) / self.config_filename

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self) -> None:
        cfg_path = self.config_path
        cfg_path.parent.mkdir(parents=True, exist_ok=True)
        tmp = cfg_path.with_suffix(cfg_path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        tmp.replace(cfg_path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        if path is None:
            raise ValueError("path must be provided for load()")
        path = Path(path)
        if not path.exists():
            # return default config with folder set
            return cls(config_folder=str(path.parent), config_filename=path.name)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(
                default_load_folder=data.get("default_load_folder", ""),
                default_save_folder=data.get("default_save_folder", ""),
                config_folder=str(path.parent),
                config_filename=path.name,
                delimiter=data.get("delimiter", DEFAULT_DELIMITER),
                pad_fraction=data.get("pad_fraction", DEFAULT_PAD_FRACTION),
                zoom_in_factor=data.get("zoom_in_factor", DEFAULT_ZOOM_IN_FACTOR),
                zoom_out_factor=data.get("zoom_out_factor", DEFAULT_ZOOM_OUT_FACTOR),
            )
        except Exception as e:
            # on parse error return defaults and keep config folder
            logger.warning("Could not read config %s: %s", path, e)
            return cls(config_folder=str(path.parent), config_filename=path.name)


def _positive_float(value, default: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if not value > 0 or value == float("inf"):
        return default
    return value


# Module-level singleton accessor
_config_singleton: Optional[Config] = None

def _default_repo_config_folder() -> Path:
    # repo root is one level up from this file: .../dataio/configuration.py
    repo_root = Path(__file__).resolve().parent.parent
    return repo_root / "config"

def get_config(recreate: bool = False) -> Config:
    """
    Return a singleton Config instance.
    On first call the JSON file in the repo config folder is loaded (or created).
    Set recreate=True to reload from disk.
    """
    global _config_singleton
    if _config_singleton is not None and not recreate:
        return _config_singleton

    cfg_folder = _default_repo_config_folder()
    cfg_file = cfg_folder / "settings.json"
    if cfg_file.exists():
        cfg = Config.load(cfg_file)
    else:
        cfg = Config(
            default_load_folder=str(Path.home()),
            default_save_folder=str(Path.home()),
            config_folder=str(cfg_folder),
            config_filename="settings.json",
        )
        try:
            cfg.save()
        except OSError as e:
            logger.warning("Could not write default config to %s: %s", cfg_file, e)
    _config_singleton = cfg
    return _config_singleton
