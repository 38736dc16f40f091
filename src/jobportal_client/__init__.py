"""jobportal API client library."""

from .call_state import CallState, CallStateWrapper, with_state
from .capabilities import (
    CallbackNavigator,
    CallbackNotifier,
    Navigator,
    NotificationKind,
    Notifier,
)
from .config import ClientConfig, load, load_from_env
from .context import ApiContext
from .exceptions import (
    ApiError,
    ApiErrorCodes,
    ConfigError,
    ConfigErrorCodes,
    StorageError,
    StorageErrorCodes,
)
from .job_service import JobService
from .logger import configure_logging, new_logger
from .middleware import MiddlewarePipeline, SessionObserver
from .profile_service import ProfileService
from .queries import JobPortalQueries, QueryKeys
from .query_cache import Mutation, QueryClient
from .service_client import (
    ServiceClient,
    ServiceClients,
    create_service_client,
    create_service_clients,
)
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from .token_store import TokenStore
from .user_service import UserService

__all__ = [
    "ApiContext",
    "ClientConfig",
    "load",
    "load_from_env",
    "new_logger",
    "configure_logging",
    "KeyValueStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "TokenStore",
    "MiddlewarePipeline",
    "SessionObserver",
    "ServiceClient",
    "ServiceClients",
    "create_service_client",
    "create_service_clients",
    "UserService",
    "ProfileService",
    "JobService",
    "QueryClient",
    "Mutation",
    "QueryKeys",
    "JobPortalQueries",
    "CallState",
    "CallStateWrapper",
    "with_state",
    "Navigator",
    "Notifier",
    "NotificationKind",
    "CallbackNavigator",
    "CallbackNotifier",
    "ApiError",
    "ApiErrorCodes",
    "StorageError",
    "StorageErrorCodes",
    "ConfigError",
    "ConfigErrorCodes",
]
