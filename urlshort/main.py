# urlshort/main.py

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from fastapi import FastAPI

from urlshort import config
from urlshort.api.redirects import router as redirects_router
from urlshort.core.loader import load_mapping
from urlshort.core.resolver import DefaultHandler, PathMapping, Resolver, chain

logger = logging.getLogger(__name__)


def build_resolver(
    config_path: Optional[Union[str, Path]] = None,
    *,
    builtin_paths: Mapping[str, str] = config.BUILTIN_PATHS,
    default: Optional[Resolver] = None,
) -> Resolver:
    """
    Startup chain: config file -> built-in paths -> default handler.

    Raises ConfigError if the file can't be read or parsed.
    """
    mappings = []
    if config_path is not None:
        mappings.append(load_mapping(config_path))
    mappings.append(PathMapping(builtin_paths))

    return chain(*mappings, default=default or DefaultHandler())


def create_app(resolver: Resolver) -> FastAPI:
    app = FastAPI(
        title="urlshort",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.resolver = resolver
    app.include_router(redirects_router)
    return app


def get_app() -> FastAPI:
    """
    Zero-argument factory, for:
        uvicorn urlshort.main:get_app --factory
    """
    return create_app(build_resolver(config.CONFIG_PATH))
