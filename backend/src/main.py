import uvicorn

from infra.config.config import get_config
from infra.web.app import create_app


def run() -> None:
    config = get_config()

    uvicorn.run(
        app=create_app(),
        host=config.HOST,
        port=config.PORT,
        access_log=False,
        log_config=None,
    )


if __name__ == "__main__":
    run()
