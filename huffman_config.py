# filename: huffman_config.py

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml


@dataclass
class CodecConfig:
    log_level: Union[str, int] = "INFO"
    log_dir: Optional[str] = None
    artifact_suffix: str = ".huff"

    def compressed_path(self, src):
        return Path(str(src) + self.artifact_suffix)

    def decompressed_path(self, src):
        src = Path(src)
        if self.artifact_suffix and src.name.endswith(self.artifact_suffix):
            return src.with_name(src.name[: -len(self.artifact_suffix)])
        return Path(str(src) + ".out")


_FIELD_TYPES = {
    "log_level": (str, int),
    "log_dir": (str, type(None)),
    "artifact_suffix": (str,),
}


def load_config(path=None) -> CodecConfig:
    if path is None:
        return CodecConfig()
    # An explicitly named file must exist; open() raises otherwise
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(data).__name__}")
    unknown = sorted(set(data) - set(_FIELD_TYPES))
    if unknown:
        raise ValueError(f"unknown config keys in {path}: {', '.join(unknown)}")
    for key, value in data.items():
        # bool is an int subclass but never a log level
        if isinstance(value, bool) or not isinstance(value, _FIELD_TYPES[key]):
            raise ValueError(f"config {path}: {key} has invalid value {value!r}")
    return CodecConfig(**data)
