# ==============================================================
# Flask host for the Wi-Fi login DFA
# - Serves the captive-portal style login page
# - Feeds one symbol per request into a single LoginValidator session
# - Exposes state, history and the transition table as JSON
# ==============================================================

import os
import logging
from flask import Flask, jsonify, render_template, request
from jinja2 import TemplateNotFound

from dfa.engine import TRANSITION_TABLE, state_name
from dfa.validator import LoginValidator
from utils.persistence import load_attempts


def create_app(validator=None):
    app = Flask(__name__)
    app.logger.setLevel(logging.INFO)
    app.config["VALIDATOR"] = validator or LoginValidator(session_name="portal")

    def current():
        return app.config["VALIDATOR"]

    # ==============================================================
    # Routes
    # ==============================================================
    @app.route('/')
    def index():
        try:
            return render_template('index.html')
        except TemplateNotFound:
            return "<h2>DFA Login Validator</h2><p>Visit /input?sym=u, /reset, /api/state</p>"

    @app.route('/input')
    def feed_input():
        sym = request.args.get('sym', '')
        if len(sym) != 1:
            app.logger.warning("[WEB] Rejected symbol %r", sym)
            return jsonify({"ok": False, "error": "sym must be a single character"}), 400
        result = current().feed(sym)
        app.logger.info("[WEB] sym=%s -> %s", sym, result)
        return result, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/reset')
    def reset():
        current().reset()
        app.logger.info("[WEB] Session reset")
        return "Reset", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/api/state')
    def api_state():
        return jsonify(current().status())

    @app.route('/api/history')
    def api_history():
        return jsonify([
            {"from": s.source.value, "symbol": s.symbol, "to": s.target.value}
            for s in current().history
        ])

    @app.route('/api/attempts')
    def api_attempts():
        return jsonify(load_attempts(log_dir=current().log_dir))

    @app.route('/api/table')
    def api_table():
        rows = []
        for src, sym, dst in TRANSITION_TABLE:
            rows.append({
                "current": src.value,
                "current_name": state_name(src),
                "input": sym if sym is not None else "*",
                "next": dst.value,
            })
        return jsonify(rows)

    return app


app = create_app()


# ==============================================================
# Main Entry
# ==============================================================
if __name__ == '__main__':
    host = os.environ.get("DFA_HOST", "0.0.0.0")
    port = int(os.environ.get("DFA_PORT", "5001"))
    app.logger.info("Starting Flask app on %s:%d", host, port)
    app.run(host=host, port=port, debug=False)
