# urlshort/core/loader.py
"""
Turn JSON/YAML configuration bytes into resolvers.

Both formats describe the same thing: a list of {path, url} records.

    [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]

    - path: /some-path
      url: https://www.some-url.com/demo

Malformed input raises ConfigParseError and no resolver is built.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from urlshort.core.resolver import MapResolver, PathMapping, Resolver
from urlshort.errors import ConfigParseError, ConfigReadError
from urlshort.models.mappings import PathToUrl

logger = logging.getLogger(__name__)

_records = TypeAdapter(List[PathToUrl])

SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def _validate(raw: Any, fmt: str, source: Optional[str]) -> List[PathToUrl]:
    if not isinstance(raw, list):
        raise ConfigParseError(
            fmt,
            f"expected a list of path/url records, got {type(raw).__name__}",
            source,
        )
    try:
        return _records.validate_python(raw)
    except ValidationError as e:
        raise ConfigParseError(fmt, str(e), source) from e


def parse_json(data: Union[bytes, str], source: Optional[str] = None) -> List[PathToUrl]:
    try:
        raw = json.loads(data)
    except (ValueError, UnicodeDecodeError) as e:
        raise ConfigParseError("json", str(e), source) from e
    return _validate(raw, "json", source)


def parse_yaml(data: Union[bytes, str], source: Optional[str] = None) -> List[PathToUrl]:
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ConfigParseError("yaml", str(e), source) from e

    # an empty document is an empty table
    if raw is None:
        return []
    return _validate(raw, "yaml", source)


def build_map(pairs: List[PathToUrl]) -> PathMapping:
    return PathMapping(pairs)


def json_resolver(data: Union[bytes, str], fallback: Resolver) -> MapResolver:
    return MapResolver(build_map(parse_json(data)), fallback)


def yaml_resolver(data: Union[bytes, str], fallback: Resolver) -> MapResolver:
    path_map = build_map(parse_yaml(data))
    logger.debug("yaml path map: %r", path_map)
    return MapResolver(path_map, fallback)


def detect_format(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    try:
        return SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ConfigParseError(
            suffix.lstrip(".") or "unknown",
            "unsupported file type (use .json, .yaml or .yml)",
            str(path),
        ) from None


def read_config(path: Union[str, Path]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e


def load_mapping(path: Union[str, Path]) -> PathMapping:
    """
    Read a config file and build its PathMapping.

    The file is read before its suffix is checked, so a missing file is
    always a ConfigReadError.
    """
    data = read_config(path)
    fmt = detect_format(path)

    if fmt == "json":
        pairs = parse_json(data, source=str(path))
    else:
        pairs = parse_yaml(data, source=str(path))

    path_map = build_map(pairs)
    logger.info("Loaded %d redirects from %s", len(path_map), path)
    return path_map
