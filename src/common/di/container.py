"""依存性注入コンテナの定義."""

from dependency_injector import containers, providers

from src.application.sessions.builder import CurationSessionBuilder
from src.common.config.seed_loader import SeedItemLoader
from src.components.curation_store.store import CurationItemStore
from src.components.preference_store.store import PreferenceStore


class Container(containers.DeclarativeContainer):
    """アプリケーション全体のDIコンテナ."""

    config = providers.Configuration()

    seed_loader = providers.Singleton(
        SeedItemLoader,
        seed_path=config.curation.seed_file,
        enabled=config.curation.seed_enabled,
    )
    seed_items = providers.Singleton(
        lambda loader: loader.load(),
        seed_loader,
    )

    curation_store = providers.Singleton(
        CurationItemStore,
        seed_items=seed_items,
    )

    preference_store = providers.Singleton(PreferenceStore)

    session_builder = providers.Factory(CurationSessionBuilder)
