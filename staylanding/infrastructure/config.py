from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///:memory:"
    reservation_source: Literal["mock", "database"] = "mock"
    mock_fetch_delay_seconds: float = 0.5
    seed_demo_reservation: bool = True
    info_blocks_path: Path = Path(__file__).resolve().parents[1] / "data/info_blocks.yaml"
    property_timezone: str = "America/New_York"
    # "frozen": now is captured once per session; "live": re-read on every status derivation
    status_clock: Literal["frozen", "live"] = "frozen"
    provisioned_door_code: str = "543210"
    log_level: str = "INFO"


settings = Settings()
