"""プロセス単位の API コンテキスト（初期化と破棄）"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from .call_state import DEFAULT_ERROR_MESSAGE, CallStateWrapper
from .capabilities import Navigator, Notifier
from .config import ClientConfig
from .job_service import JobService
from .logger import configure_logging
from .middleware import SessionObserver
from .profile_service import ProfileService
from .queries import JobPortalQueries
from .query_cache import QueryClient
from .service_client import ServiceClients, create_service_clients
from .storage import KeyValueStorage
from .token_store import TokenStore
from .user_service import UserService

logger = structlog.get_logger(__name__)


@dataclass
class ApiContext:
    """起動時に一度だけ組み立てる、クライアント層の依存関係一式。

    グローバル変数の代わりにこのオブジェクトを呼び出し側へ渡す。
    """

    config: ClientConfig
    token_store: TokenStore
    session_observer: SessionObserver
    clients: ServiceClients
    users: UserService
    profiles: ProfileService
    jobs: JobService
    query_client: QueryClient
    queries: JobPortalQueries
    notifier: Notifier | None = None

    @classmethod
    def init(
        cls,
        config: ClientConfig,
        storage: KeyValueStorage,
        navigator: Navigator | None,
        notifier: Notifier | None = None,
    ) -> ApiContext:
        configure_logging(config.log)
        token_store = TokenStore(storage)
        observer = SessionObserver(token_store, navigator)
        clients = create_service_clients(config, token_store, observer)
        users = UserService(clients.user)
        profiles = ProfileService(clients.profile)
        jobs = JobService(clients.job)
        query_client = QueryClient()
        queries = JobPortalQueries(users, profiles, jobs, query_client, token_store)
        logger.info(
            "api_context.initialized",
            user_service=config.services.user,
            profile_service=config.services.profile,
            job_service=config.services.job,
            timeout_ms=config.timeout_ms,
        )
        return cls(
            config=config,
            token_store=token_store,
            session_observer=observer,
            clients=clients,
            users=users,
            profiles=profiles,
            jobs=jobs,
            query_client=query_client,
            queries=queries,
            notifier=notifier,
        )

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.is_authenticated()

    def call_state(self, fallback_message: str = DEFAULT_ERROR_MESSAGE) -> CallStateWrapper:
        """コンテキストの通知先を使う新しい呼び出し状態ラッパーを返す。"""
        return CallStateWrapper(notifier=self.notifier, fallback_message=fallback_message)

    def teardown(self) -> None:
        """ログアウト: セッションを破棄し、クエリキャッシュを空にする。"""
        self.token_store.clear_auth()
        self.query_client.clear()
        logger.info("api_context.teardown")
