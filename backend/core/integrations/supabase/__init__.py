from core.integrations.supabase.settings import settings, SupabaseSettings
from core.integrations.supabase.client import SupabaseClient

__all__ = [
    "settings",
    "SupabaseSettings",
    "SupabaseClient",
]
