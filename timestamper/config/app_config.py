#!filepath: timestamper/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .api_config import ApiConfig
from .log_config import LogConfig
from .output_config import OutputConfig

# 环境变量 → api 配置字段
_API_ENV_OVERRIDES = {
    "TIMESTAMPER_HOST": "host",
    "TIMESTAMPER_PORT": "port",
    "TIMESTAMPER_TIMESTAMPS_DIR": "timestamps_dir",
}


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    timestamper/config/app_config.py → timestamper/config → timestamper → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 timestamper/config/base.yml
        - 不依赖当前工作目录
        - TIMESTAMPER_* 环境变量覆盖 api 段
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入覆盖项
        api = dict(raw.get("api") or {})
        for env_name, field in _API_ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                api[field] = value
        raw["api"] = api

        return cls(**raw)
