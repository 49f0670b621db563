from types import MappingProxyType
from typing import Mapping

from src.core.config import Settings, settings


def build_cors_headers(config: Settings) -> Mapping[str, str]:
    """Build the read-only CORS header set attached to preflight and signup responses."""
    return MappingProxyType(
        {
            "Access-Control-Allow-Origin": config.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": config.CORS_ALLOW_METHODS,
            "Access-Control-Allow-Headers": config.CORS_ALLOW_HEADERS,
        }
    )


CORS_HEADERS = build_cors_headers(settings)
