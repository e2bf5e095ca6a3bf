"""用法: cd backend && python -m tools.run_supabase_migration"""

import os
import sys
from dotenv import load_dotenv
import psycopg2

from core.common.log import logger

SQL_PATH = os.path.join(os.path.dirname(__file__), "..", "sql", "create_events_table.sql")


def read_sql_file(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def connect(db_url):
    try:
        return psycopg2.connect(db_url)
    except Exception:
        host = os.getenv("POSTGRES_HOST", "")
        if host == "host.docker.internal":
            # 容器外运行时 host.docker.internal 不可达，改用 localhost 重试
            return psycopg2.connect(db_url.replace("host.docker.internal", "localhost"))
        raise


def apply_migration(db_url=None, sql_path=SQL_PATH):
    """在单个事务中执行 events 表迁移脚本"""
    load_dotenv()
    db_url = db_url or os.getenv("SUPABASE_DB_URL")
    if not db_url:
        raise ValueError("SUPABASE_DB_URL 未设置")

    # 脚本中含 $$ 函数体，整体执行而不是按分号拆分
    sql = read_sql_file(os.path.abspath(sql_path))
    conn = connect(db_url)
    conn.autocommit = False
    try:
        with conn.cursor() as cur:
            cur.execute(sql)
        conn.commit()
        logger.info("Migration applied: events")
    except Exception as e:
        conn.rollback()
        logger.error(f"Migration failed: {e}")
        raise
    finally:
        conn.close()


def main():
    try:
        apply_migration()
    except Exception as e:
        print(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
