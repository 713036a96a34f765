import os
from dataclasses import dataclass

import yaml

# default config keys used:
# shingles:
#   ngram_size: 3
#   table_size_hint: 100003
# input:
#   max_file_size: 1000000
# output:
#   precision: 2

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "config_default.yaml")


@dataclass(frozen=True)
class Settings:
    ngram_size: int = 3
    max_file_size: int = 1_000_000
    table_size_hint: int = 100003
    precision: int = 2

    def __post_init__(self):
        for name in ("ngram_size", "max_file_size", "table_size_hint"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.precision, int) or isinstance(self.precision, bool) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")


def load_config(path=None):
    path = path or DEFAULT_CONFIG
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_settings(path=None) -> Settings:
    """Read the packaged YAML and build Settings; missing keys keep their defaults."""
    cfg = load_config(path)
    shingles = cfg.get("shingles", {}) or {}
    inp = cfg.get("input", {}) or {}
    out = cfg.get("output", {}) or {}
    defaults = Settings()
    return Settings(
        ngram_size=shingles.get("ngram_size", defaults.ngram_size),
        table_size_hint=shingles.get("table_size_hint", defaults.table_size_hint),
        max_file_size=inp.get("max_file_size", defaults.max_file_size),
        precision=out.get("precision", defaults.precision),
    )
