"""Flask API application."""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from sololife.agents.quest_generator import QuestGenerator
from sololife.api.llm_config import LLMConfig, LLMConfigManager
from sololife.config import (
    DEFAULT_API_PORT,
    DEFAULT_GENERATE_ON_START,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PREFERENCES_PATH,
)
from sololife.engine.notifications import NotificationCenter
from sololife.engine.session import GameSession
from sololife.errors import InvalidArgumentError, OutOfRangeError, SoloLifeError
from sololife.models.player_class import PlayerClass
from sololife.persistence.preferences import PreferencesStore
from sololife.persistence.progress_store import ProgressStore

app = Flask("flask.sololife")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors."""
    response = e.get_response()
    response.data = jsonify(
        {
            "error": e.name,
            "code": e.code,
            "description": e.description,
        }
    ).data
    response.content_type = "application/json"
    return response


@app.errorhandler(OutOfRangeError)
def handle_out_of_range(e: OutOfRangeError):
    return jsonify({"error": "Quest not found", "message": str(e)}), 404


@app.errorhandler(InvalidArgumentError)
def handle_invalid_argument(e: InvalidArgumentError):
    return jsonify({"error": "Invalid argument", "message": str(e)}), 400


@app.errorhandler(SoloLifeError)
def handle_domain_error(e: SoloLifeError):
    app.logger.error(f"Unhandled domain error: {e}", exc_info=True)
    return jsonify({"error": "Request failed", "message": str(e)}), 500


_llm_config_manager = LLMConfigManager()
_session: Optional[GameSession] = None


def _get_session() -> GameSession:
    """Get or create the game session, loading saved progress on first use."""
    global _session
    if _session is None:
        store = ProgressStore(PreferencesStore(DEFAULT_PREFERENCES_PATH))
        generator = QuestGenerator(config_manager=_llm_config_manager)
        session = GameSession(store=store, generator=generator, notifications=NotificationCenter())
        session.load_progress(generate_if_empty=DEFAULT_GENERATE_ON_START)
        _session = session
    return _session


def set_session(session: Optional[GameSession]) -> None:
    """Install the session served by the API (None to rebuild from config)."""
    global _session
    _session = session


def _serialize_notifications(session: GameSession) -> list[dict]:
    return [n.model_dump(mode="json") for n in session.notifications.drain()]


@app.route("/api/classes", methods=["GET"])
def list_classes():
    """List selectable classes and the current selection."""
    session = _get_session()
    return jsonify(
        {
            "classes": [player_class.value for player_class in PlayerClass],
            "selected": session.player_class.value,
        }
    )


@app.route("/api/class", methods=["POST"])
def select_class():
    """Select the player class."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json() or {}
    player_class = data.get("player_class")
    if not player_class:
        return jsonify({"error": "player_class is required"}), 400

    session = _get_session()
    selected = session.select_class(player_class)
    return jsonify({"success": True, "player_class": selected.value})


@app.route("/api/state", methods=["GET"])
def get_state():
    """Get current stats and pending quests."""
    return jsonify({"state": _get_session().snapshot()})


@app.route("/api/quests/generate", methods=["POST"])
def generate_quests():
    """Replace pending quests with a freshly generated batch."""
    session = _get_session()
    success, error_msg = session.generate_quests()
    body = {
        "success": success,
        "error": error_msg,
        "state": session.snapshot(),
        "notifications": _serialize_notifications(session),
    }
    return jsonify(body), 200 if success else 502


@app.route("/api/quests/<int:index>/complete", methods=["POST"])
def complete_quest(index: int):
    """Complete a pending quest and apply its reward."""
    session = _get_session()
    reward = session.complete_quest(index)
    return jsonify(
        {
            "success": True,
            "reward": reward.model_dump(by_alias=True),
            "state": session.snapshot(),
            "notifications": _serialize_notifications(session),
        }
    )


@app.route("/api/notifications", methods=["GET"])
def get_notifications():
    """Return and clear pending notifications."""
    return jsonify({"notifications": _serialize_notifications(_get_session())})


@app.route("/api/config/llm", methods=["GET"])
def get_llm_config():
    """Get current LLM configuration."""
    config = _llm_config_manager.config.model_dump(exclude={"api_key"})
    return jsonify({"config": config})


@app.route("/api/config/llm", methods=["POST"])
def update_llm_config():
    """Update LLM configuration (hot-reload)."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json()
    if not data:
        return jsonify({"error": "No data provided"}), 400

    try:
        new_config = LLMConfig(**data)
    except Exception as e:
        app.logger.error(f"Error updating LLM config: {e}", exc_info=True)
        return jsonify({"error": "Invalid configuration", "message": str(e)}), 400

    _llm_config_manager.update_config(new_config)
    return jsonify({"success": True, "config": new_config.model_dump(exclude={"api_key"})})


def main() -> None:
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')
    app.run(port=DEFAULT_API_PORT)


if __name__ == "__main__":
    main()
