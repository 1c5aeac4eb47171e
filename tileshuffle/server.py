"""HTTP endpoint that returns the unscrambled version of a remote image."""

from __future__ import annotations

from typing import Optional

from flask import Flask, Response, request
from werkzeug.exceptions import BadRequest

from .canvas import content_type, load_image
from .errors import DecodeError, TileShuffleError
from .reassembler import ImageReassembler, ReassemblerConfig

OUTPUT_FORMAT = "png"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _plain(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def create_app(config: Optional[ReassemblerConfig] = None) -> Flask:
    """Build the Flask app; the reassembler config defaults to the environment."""
    app = Flask(__name__)
    reassembler = ImageReassembler(config if config is not None else ReassemblerConfig.from_env())

    @app.route("/", methods=ALL_METHODS)
    @app.route("/unshuf", methods=ALL_METHODS)
    def unshuf() -> Response:
        if request.method != "POST":
            return _plain("Bad request: Only POST method is allowed", 400)

        try:
            body = request.get_json(force=True)
        except BadRequest:
            return _plain("Bad request: request body is not valid JSON", 400)

        img_url = body.get("imgURL") if isinstance(body, dict) else None
        if not img_url:
            return _plain("Bad request: missing imgURL in request body", 400)
        if not str(img_url).startswith(("http://", "https://")):
            return _plain("Bad request: imgURL must be an http(s) URL", 400)

        app.logger.info("unscrambling %s", img_url)
        try:
            image = load_image(str(img_url))
            data = reassembler.encode_unscrambled(image, OUTPUT_FORMAT)
        except DecodeError:
            app.logger.exception("could not load %s", img_url)
            return _plain("Bad gateway: could not load image from imgURL", 502)
        except TileShuffleError:
            app.logger.exception("failed to unscramble %s", img_url)
            return _plain("Internal server error", 500)

        return Response(data, status=200, mimetype=content_type(OUTPUT_FORMAT))

    return app


if __name__ == "__main__":
    create_app().run()
