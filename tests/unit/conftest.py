"""テスト共通のフィクスチャ"""
import pytest

from shrine_log.features.detection.domain.models import ShrineRecord
from shrine_log.features.invocation.container import ServiceContainer
from shrine_log.infrastructure.config.settings import Settings

from fakes import FakeShrineSource


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def shrine_source() -> FakeShrineSource:
    return FakeShrineSource(
        [
            ShrineRecord("meiji", name="明治神宮", prefecture="東京都", latitude=35.6764, longitude=139.6993),
            ShrineRecord("togo", name="東郷神社", prefecture="東京都", latitude=35.6706, longitude=139.7057),
        ]
    )


@pytest.fixture
def container(settings: Settings, shrine_source: FakeShrineSource) -> ServiceContainer:
    return ServiceContainer(settings, shrine_source=shrine_source)
