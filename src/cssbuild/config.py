from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = True  # reject anything but ' ', '+', '~', '>'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BuilderConfig:
        """Build a config from ``CSSBUILD_*`` environment variables."""
        env = os.environ if environ is None else environ
        raw = env.get("CSSBUILD_STRICT_COMBINATORS")
        if raw is None:
            return cls()
        return cls(strict_combinators=raw.strip().lower() not in _FALSE_VALUES)
