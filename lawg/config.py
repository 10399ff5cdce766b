from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class LoggerConfig:
    name: str
    file_path: Optional[Union[str, os.PathLike]] = None
    include_timestamp: bool = True
    use_utc: bool = True  # False = local wall-clock time

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"'name' must be a string, but got {type(self.name).__name__}.")
