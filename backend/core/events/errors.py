class EventStoreError(Exception):
    """活动存储相关异常的基类"""


class RemoteBackendError(EventStoreError):
    """远端（Supabase）查询或网络失败，触发本地回退"""

    def __init__(self, operation: str, cause: BaseException | str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Supabase {operation} 失败: {cause}")


class LocalStorageError(EventStoreError):
    """本地存储读写或序列化失败"""


class EventNotFoundError(EventStoreError):
    """活动不存在（仅本地更新时抛出）"""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"活动不存在: {event_id}")
