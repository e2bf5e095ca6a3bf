import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class SupabaseSettings:
    url: str
    anon_key: str
    service_key: str

    @property
    def api_key(self) -> str:
        """events 表开放了 public RLS 策略，优先使用匿名密钥"""
        return self.anon_key or self.service_key

    def available(self) -> bool:
        return bool(self.url and self.api_key)


def load_supabase_settings() -> SupabaseSettings:
    return SupabaseSettings(
        url=os.getenv("SUPABASE_URL", "").rstrip("/"),
        anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
        service_key=os.getenv("SUPABASE_SERVICE_KEY", ""),
    )


settings = load_supabase_settings()
