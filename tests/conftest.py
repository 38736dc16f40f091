"""共通フィクスチャ"""

import pytest
from jobportal_client.capabilities import Navigator, NotificationKind, Notifier
from jobportal_client.config import ClientConfig, ServicesSection
from jobportal_client.context import ApiContext
from jobportal_client.storage import InMemoryStorage

USER_URL = "http://user-service:8080"
PROFILE_URL = "http://profile-service:8081"
JOB_URL = "http://job-service:8082"


class RecordingNavigator(Navigator):
    """遷移回数を記録する Navigator。"""

    def __init__(self) -> None:
        self.redirects = 0

    def redirect_to_entry_point(self) -> None:
        self.redirects += 1


class RecordingNotifier(Notifier):
    """通知内容を記録する Notifier。"""

    def __init__(self) -> None:
        self.notices: list[tuple[str, str]] = []

    def notify(self, kind: NotificationKind | str, message: str) -> None:
        self.notices.append((str(kind), message))


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        services=ServicesSection(user=USER_URL, profile=PROFILE_URL, job=JOB_URL),
        timeout_ms=1000,
    )


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def ctx(
    config: ClientConfig, navigator: RecordingNavigator, notifier: RecordingNotifier
) -> ApiContext:
    return ApiContext.init(config, InMemoryStorage(), navigator, notifier)
