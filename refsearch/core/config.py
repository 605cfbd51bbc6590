"""Configuration from environment variables (.env)."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    project_root: Path
    logs_dir: Path
    supabase_url: str
    supabase_anon_key: str
    debounce_ms: int
    min_query_length: int
    result_limit: int  # Max results per category
    adapter_timeout_seconds: float
    http_timeout_seconds: float

    @classmethod
    def load(cls) -> "Config":
        project_root = Path(__file__).parent.parent.parent
        logs_dir = os.getenv("REFSEARCH_LOGS_DIR", "").strip()
        return cls(
            project_root=project_root,
            logs_dir=Path(logs_dir) if logs_dir else project_root / "logs",
            supabase_url=os.getenv("SUPABASE_URL", "").strip().rstrip("/"),
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
            debounce_ms=int(os.getenv("REFSEARCH_DEBOUNCE_MS", "300")),
            min_query_length=int(os.getenv("REFSEARCH_MIN_QUERY_LENGTH", "2")),
            result_limit=int(os.getenv("REFSEARCH_RESULT_LIMIT", "10")),
            adapter_timeout_seconds=float(os.getenv("REFSEARCH_ADAPTER_TIMEOUT", "5.0")),
            http_timeout_seconds=float(os.getenv("REFSEARCH_HTTP_TIMEOUT", "10.0")),
        )

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    def validate(self, needs_remote: bool = True) -> list[str]:
        errors = []
        if needs_remote and not self.supabase_url:
            errors.append("SUPABASE_URL is not set; remote categories cannot be searched")
        if needs_remote and not self.supabase_anon_key:
            errors.append("SUPABASE_ANON_KEY is not set")
        if self.min_query_length < 1:
            errors.append(f"REFSEARCH_MIN_QUERY_LENGTH must be >= 1, got {self.min_query_length}")
        if not 1 <= self.result_limit <= 50:
            errors.append(f"REFSEARCH_RESULT_LIMIT must be in 1..50, got {self.result_limit}")
        if self.adapter_timeout_seconds <= 0:
            errors.append("REFSEARCH_ADAPTER_TIMEOUT must be positive")
        return errors


config = Config.load()
