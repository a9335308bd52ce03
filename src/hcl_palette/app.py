from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, jsonify, request

from .actions import action_names, parse_action
from .colour import InvalidColourError, from_requested, parse_colour
from .ids import IdAllocator
from .store import PaletteStore

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "LOG_LEVEL": "INFO",
    "ID_START": 1,
}

PREVIEW_ID = "preview"


def _preview_args() -> tuple[float, float, float]:
    """(h, c, l) from either ?hex= or ?h=&c=&l= query arguments."""
    hex_ = request.args.get("hex")
    if hex_ is not None:
        return parse_colour(hex_)
    try:
        return tuple(float(request.args[ch]) for ch in ("h", "c", "l"))  # type: ignore[return-value]
    except KeyError as e:
        raise ValueError(f"missing query argument {e.args[0]!r}") from e


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("PALETTE")
    if test_config is not None:
        app.config.from_mapping(test_config)
    logging.basicConfig(
        level=getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )

    store = PaletteStore(ids=IdAllocator(start=int(app.config["ID_START"])))
    app.extensions["palette_store"] = store

    @app.get("/state")
    def state():
        return jsonify(store.state.to_dict())

    @app.post("/actions")
    def actions():
        payload = request.get_json(silent=True)
        try:
            action = parse_action(payload)
        except ValueError as e:
            return jsonify({"error": str(e), "supported": action_names()}), 400
        try:
            new = store.dispatch(action)
        except Exception as exc:
            log.exception("Dispatch failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(new.to_dict())

    @app.get("/colour")
    def colour():
        try:
            h, c, l = _preview_args()
        except InvalidColourError as e:
            return jsonify({"error": str(e)}), 400
        except ValueError as e:
            return jsonify({"error": f"invalid channel: {e}"}), 400
        return jsonify(from_requested(h, c, l, id=PREVIEW_ID).to_dict())

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
