"""FastAPIアプリケーションのエントリポイント."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.gallery.gallery import available_filters, build_gallery, filter_gallery
from src.application.sessions.builder import CurationSessionBuilder
from src.common.config.settings import load_config
from src.common.defs.curation import CurationItem
from src.common.defs.errors import CurationError, MalformedInputError, NotFoundError
from src.common.defs.preference import PreferenceInput, PreferenceUpdate, UserPreference
from src.common.di.container import Container
from src.common.lib.logging import getLogger
from src.common.schema.api import (
    CurationItemsResponse,
    CurationSessionRequest,
    GalleryRequest,
    GalleryResponse,
)
from src.components.csv_parser.parser import parse_csv
from src.components.curation_store.store import CurationItemStore
from src.components.preference_store.store import PreferenceStore

logger = getLogger(__name__)

router = APIRouter()


def get_container(request: Request) -> Container:
    """リクエスト元アプリケーションのDIコンテナを返す."""
    return request.app.state.container


def get_curation_store(container: Container = Depends(get_container)) -> CurationItemStore:
    """CurationItemStoreを返す."""
    return container.curation_store()


def get_preference_store(container: Container = Depends(get_container)) -> PreferenceStore:
    """PreferenceStoreを返す."""
    return container.preference_store()


def get_session_builder(container: Container = Depends(get_container)) -> CurationSessionBuilder:
    """CurationSessionBuilderを返す."""
    return container.session_builder()


@contextmanager
def _internal_error(message: str) -> Iterator[None]:
    """想定外の例外をログに残し、固定メッセージの500に変換する."""
    try:
        yield
    except (CurationError, HTTPException):
        raise
    except Exception:
        logger.exception(message)
        raise HTTPException(status_code=500, detail=message) from None


def _paging_value(raw: str | None, minimum: int, default: int) -> int:
    """ページング指定を整数に変換する. 解釈できない値や下限未満は既定値に戻す."""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= minimum else default


@router.get("/health")
def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント.

    Returns:
        ステータス情報
    """
    return {"status": "ok"}


@router.get("/api/curation-items", response_model=CurationItemsResponse)
def list_curation_items(
    request: Request,
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
    store: CurationItemStore = Depends(get_curation_store),
) -> CurationItemsResponse:
    """CurationItem一覧をID昇順でページングして返す.

    Args:
        request: リクエスト
        limit: 取得件数（省略時や1未満・数値以外は設定のページサイズ）
        offset: 読み飛ばす件数（省略時や負数・数値以外は0）
        store: CurationItemStore

    Returns:
        アイテム一覧と総件数
    """
    with _internal_error("Failed to fetch curation items"):
        page_size = _paging_value(limit, minimum=1, default=request.app.state.config.curation.page_size)
        start = _paging_value(offset, minimum=0, default=0)
        return CurationItemsResponse(items=store.list_items(page_size, start), total=store.count())


@router.get("/api/curation-items/{item_id}", response_model=CurationItem)
def get_curation_item(
    item_id: int,
    store: CurationItemStore = Depends(get_curation_store),
) -> CurationItem:
    """IDを指定してCurationItemを返す."""
    with _internal_error("Failed to fetch curation item"):
        item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Curation item not found")
    return item


@router.post("/api/curation-sessions", response_model=CurationItemsResponse)
def create_curation_session(
    body: CurationSessionRequest,
    builder: CurationSessionBuilder = Depends(get_session_builder),
) -> CurationItemsResponse:
    """アップロードされた2つのCSVからCurationItemを合成する.

    合成結果はストアに保存しない.

    Args:
        body: 出力種別とモデルA/BのCSVテキスト
        builder: CurationSessionBuilder

    Returns:
        合成したアイテムと件数
    """
    with _internal_error("Failed to build curation session"):
        items = builder.build_from_text(body.model_a_csv, body.model_b_csv, body.output_type, body.images)
        return CurationItemsResponse(items=items, total=len(items))


@router.post("/api/gallery", response_model=GalleryResponse)
def gallery(body: GalleryRequest) -> GalleryResponse:
    """画像ごとの出力とタグを、検索条件で絞り込んで返す."""
    with _internal_error("Failed to build gallery"):
        entries = build_gallery(
            body.images,
            parse_csv(body.model_a_csv),
            parse_csv(body.model_b_csv),
            body.output_type,
        )
        filters = available_filters(entries)
        matched = filter_gallery(entries, body.search, body.tag, body.graphic_type)
        return GalleryResponse(
            entries=matched,
            tags=filters.tags,
            graphic_types=filters.graphic_types,
            total=len(matched),
        )


@router.get("/api/preferences/{item_id}", response_model=UserPreference | None)
def get_preference(
    item_id: int,
    store: PreferenceStore = Depends(get_preference_store),
) -> UserPreference | None:
    """アイテムのPreferenceを返す. 未保存ならnull."""
    with _internal_error("Failed to fetch user preference"):
        return store.get(item_id)


@router.post("/api/preferences", response_model=UserPreference)
def save_preference(
    body: PreferenceInput,
    store: PreferenceStore = Depends(get_preference_store),
) -> UserPreference:
    """Preferenceを新規作成、または既存レコードにマージする."""
    with _internal_error("Failed to save user preference"):
        return store.upsert(body)


@router.patch("/api/preferences/{item_id}", response_model=UserPreference)
def update_preference(
    item_id: int,
    body: PreferenceUpdate,
    store: PreferenceStore = Depends(get_preference_store),
) -> UserPreference:
    """既存Preferenceを部分更新する. 存在しない場合は404."""
    try:
        with _internal_error("Failed to update user preference"):
            return store.update(item_id, body)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User preference not found") from None


def _message_response(status_code: int, message: str, errors: list | None = None) -> JSONResponse:
    content: dict = {"message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """エラーレスポンスを {"message": ...} 形式に揃える例外ハンドラを登録する.

    Args:
        app: FastAPIインスタンス
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _message_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        return _message_response(400, "Invalid request data", jsonable_encoder(exc.errors()))

    @app.exception_handler(MalformedInputError)
    async def malformed_input(_: Request, exc: MalformedInputError) -> JSONResponse:
        return _message_response(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return _message_response(404, str(exc))


def create_app(container: Container | None = None) -> FastAPI:
    """FastAPIアプリケーションを生成する.

    Args:
        container: 使用するDIコンテナ. 省略時は環境変数の設定から生成する.

    Returns:
        FastAPIインスタンス
    """
    config = load_config()
    app = FastAPI(title="Model Output Curation")

    if container is None:
        container = Container()
        container.config.from_dict(config.model_dump())
    app.state.container = container
    app.state.config = config

    register_exception_handlers(app)
    app.include_router(router)

    logger.info(
        "Curation service ready: %d seed items",
        container.curation_store().count(),
    )
    return app


app = create_app()
