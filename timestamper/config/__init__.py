# !filepath: timestamper/config/__init__.py
from .app_config import AppConfig
from .log_config import LogConfig
from .api_config import ApiConfig
from .output_config import OutputConfig

__all__ = ["AppConfig", "LogConfig", "ApiConfig", "OutputConfig"]
