# urlshort/errors.py

from typing import Optional


class ConfigError(Exception):
    """Base class for anything that stops the redirect table from being built."""


class ConfigReadError(ConfigError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        super().__init__(f"cannot read config file {self.path}: {reason}")


class ConfigParseError(ConfigError):
    def __init__(self, fmt: str, message: str, source: Optional[str] = None):
        self.fmt = fmt
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"invalid {fmt} config{where}: {message}")
