"""キュレーションAPIサーバー起動スクリプト."""

import uvicorn
from dotenv import load_dotenv

from src.common.config.settings import load_config
from src.common.lib.logging import getLogger

logger = getLogger(__name__)


def main() -> None:
    """設定を読み込みuvicornでAPIサーバーを起動する."""
    load_dotenv()
    config = load_config()
    logger.info("Starting curation server on %s:%d", config.server.host, config.server.port)
    uvicorn.run(
        "src.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
