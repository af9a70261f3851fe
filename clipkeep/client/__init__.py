"""Clip client: API access, local reconciliation and the counter widget."""

from clipkeep.client.api_client import ClipApiClient, ClipApiError
from clipkeep.client.config import ClientConfig, get_client_config
from clipkeep.client.copy_marker import CopyMarker
from clipkeep.client.counter import Counter
from clipkeep.client.local_state import LocalState, LocalStateStore
from clipkeep.client.schemas import Clip, ClipFormData
from clipkeep.client.session import ClipSession, ErrorCategory, SessionError

__all__ = [
    "Clip",
    "ClipApiClient",
    "ClipApiError",
    "ClipFormData",
    "ClipSession",
    "ClientConfig",
    "CopyMarker",
    "Counter",
    "ErrorCategory",
    "LocalState",
    "LocalStateStore",
    "SessionError",
    "get_client_config",
]
