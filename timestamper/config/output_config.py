#!filepath: timestamper/config/output_config.py
from pydantic import BaseModel


class OutputConfig(BaseModel):
    # CLI 未传 --query 时使用的查询串，例如 "precision=6"
    default_query: str = ""
