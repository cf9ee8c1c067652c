# timestamper/api/app.py
from __future__ import annotations

from itertools import chain
from pathlib import Path

from flask import Flask, Response, current_app, jsonify, request, stream_with_context

from timestamper.api.decorators import handle_build_errors
from timestamper.config import AppConfig
from timestamper.core.output import render_lines
from timestamper.core.precision import resolve_precision
from timestamper.io.reader import TimestampsFileReader
from timestamper.utils.errors import BuildNotFoundError
from timestamper.utils.logger import logs

TIMESTAMPS_FILE = "timestamps"


def timestamps_path(root: Path, build_id: str) -> Path:
    """
    <root>/<build_id>/timestamps；build_id 不允许跨目录
    """
    if not build_id or build_id in (".", "..") or "/" in build_id or "\\" in build_id:
        raise BuildNotFoundError(build_id)

    path = root / build_id / TIMESTAMPS_FILE
    if not path.is_file():
        raise BuildNotFoundError(build_id)
    return path


def create_app(config: AppConfig | None = None) -> Flask:
    if config is None:
        config = AppConfig.load()

    app = Flask(__name__)
    app.config["TIMESTAMPS_DIR"] = Path(config.api.timestamps_dir)
    app.config["MAX_PRECISION"] = config.api.max_precision

    @app.get("/builds/<build_id>/timestamps")
    @handle_build_errors
    def get_timestamps(build_id: str):
        path = timestamps_path(current_app.config["TIMESTAMPS_DIR"], build_id)

        query_string = request.query_string.decode("utf-8", errors="replace")
        precision = resolve_precision(query_string)
        max_precision = current_app.config["MAX_PRECISION"]
        if precision > max_precision:
            return jsonify({
                "error": "precision too large",
                "precision": precision,
                "max_precision": max_precision,
            }), 400

        reader = TimestampsFileReader(path)
        lines = render_lines(reader, precision)
        try:
            # 先读第一条：文件损坏时在响应头发出前返回 500
            first_line = next(lines, None)
        except Exception:
            reader.close()
            raise
        first = [] if first_line is None else [first_line]

        logs.debug(f"[API] streaming timestamps build={build_id} precision={precision}")
        response = Response(
            stream_with_context(chain(first, lines)),
            mimetype="text/plain",
        )
        # 响应结束（含未迭代即关闭）时释放文件句柄
        response.call_on_close(reader.close)
        return response

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    return app
