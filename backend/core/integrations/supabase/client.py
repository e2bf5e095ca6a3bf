from typing import Optional, Dict, Any, List
from supabase import create_client, Client

from core.integrations.supabase.settings import settings as default_settings, SupabaseSettings
from core.common.log import logger


class SupabaseClient:
    """Supabase数据库客户端"""

    def __init__(self, settings: Optional[SupabaseSettings] = None):
        settings = settings or default_settings
        self.url = settings.url
        self.key = settings.api_key
        self.client: Optional[Client] = None
        self._initialized = False

    def init(self):
        """初始化Supabase客户端"""
        if not self.url or not self.key:
            raise ValueError("SUPABASE_URL和SUPABASE_ANON_KEY(或SUPABASE_SERVICE_KEY)环境变量必须设置")

        if self._initialized:
            return

        try:
            self.client = create_client(self.url, self.key)
            self._initialized = True
            logger.info("Supabase客户端初始化成功")
        except Exception as e:
            logger.error(f"Supabase客户端初始化失败: {e}")
            raise

    def get_client(self) -> Client:
        """获取Supabase客户端实例"""
        if not self._initialized or not self.client:
            self.init()

        if not self.client:
            raise RuntimeError("Supabase客户端尚未成功初始化")

        return self.client

    def from_table(self, table_name: str):
        """获取表操作对象"""
        return self.get_client().table(table_name)

    @staticmethod
    def _apply_filters(query, filters: Optional[Dict[str, Any]]):
        """添加等值过滤条件"""
        for key, value in (filters or {}).items():
            query = query.eq(key, value)
        return query

    #! 以下为基础CRUD操作
    async def select(
        self,
        table: str,
        filters: Optional[Dict] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """查询数据"""
        try:
            query = self._apply_filters(self.from_table(table).select("*"), filters)

            # 添加排序
            if order:
                query = query.order(order, desc=desc)

            # 限制条数
            if limit:
                query = query.limit(limit)

            response = query.execute()
            return response.data if response.data else []

        except Exception as e:
            logger.error(f"查询表 {table} 失败: {e}")
            raise

    async def insert(self, table: str, data: Dict) -> Dict[str, Any]:
        """插入数据，返回插入后的整行"""
        try:
            response = self.from_table(table).insert(data).execute()
            return response.data[0] if response.data else {}
        except Exception as e:
            logger.error(f"插入数据到表 {table} 失败: {e}")
            raise

    async def update(self, table: str, data: Dict, filters: Dict) -> List[Dict[str, Any]]:
        """更新数据"""
        try:
            query = self._apply_filters(self.from_table(table).update(data), filters)
            response = query.execute()
            return response.data if response.data else []

        except Exception as e:
            logger.error(f"更新表 {table} 失败: {e}")
            raise

    async def delete(self, table: str, filters: Dict) -> List[Dict[str, Any]]:
        """删除数据"""
        try:
            query = self._apply_filters(self.from_table(table).delete(), filters)
            response = query.execute()
            return response.data if response.data else []

        except Exception as e:
            logger.error(f"删除表 {table} 数据失败: {e}")
            raise
