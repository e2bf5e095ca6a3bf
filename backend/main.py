import argparse
import uvicorn

from core.common.app_settings import settings
from core.common.log import configure_logger
from core.common.log import logger
from core.common.base import VERSION, API_BASE


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument("-init", help="执行 events 表迁移", default=False)
    return parser.parse_known_args()[0]


def log_app_banner() -> None:
    logger.info(f"名称:{settings.app_name}\n版本:{VERSION} API_BASE:{API_BASE}")
    if settings.events_use_supabase:
        logger.info("活动存储: Supabase 优先, 失败回退本地存储")
    else:
        logger.warning(f"活动存储: 仅本地存储 path={settings.local_storage_path}")


if __name__ == "__main__":
    args = parse_args()
    configure_logger(level=settings.log_level, log_file=settings.log_file)
    log_app_banner()
    if args.init == "True":
        from tools.run_supabase_migration import apply_migration

        apply_migration()
    logger.info("启动服务器")
    auto_reload = settings.auto_reload
    workers = settings.threads
    if auto_reload and workers > 1:
        logger.warning("AUTO_RELOAD=True 时 workers 必须为 1，已自动降为 1")
        workers = 1

    run_kwargs = {
        "app": "web:app",
        "host": "0.0.0.0",
        "port": settings.port,
        "workers": workers,
    }
    if auto_reload:
        run_kwargs.update(
            {
                "reload": True,
                "reload_dirs": ["core", "apis", "schemas"],
                "reload_excludes": ["data"],
            }
        )

    uvicorn.run(**run_kwargs)
