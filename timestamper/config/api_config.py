#!filepath: timestamper/config/api_config.py
from pydantic import BaseModel, Field


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    # <timestamps_dir>/<build_id>/timestamps
    timestamps_dir: str = "data/builds"
    # HTTP 请求允许的最大小数位数（核心本身不限制）
    max_precision: int = Field(default=64, ge=0)
