"""Congress.gov APIクライアントパッケージ."""

from .client import CongressApiClient
from .converter import CongressMemberConverter
from .decoder import decode_members
from .errors import (
    CongressApiError,
    ConfigError,
    SchemaError,
    TransportError,
    UpstreamError,
)
from .service import CongressMemberLookupService
from .types import ApiMember, ApiTerm, ApiTerms


__all__ = [
    "ApiMember",
    "ApiTerm",
    "ApiTerms",
    "CongressApiClient",
    "CongressApiError",
    "CongressMemberConverter",
    "CongressMemberLookupService",
    "ConfigError",
    "SchemaError",
    "TransportError",
    "UpstreamError",
    "decode_members",
]
