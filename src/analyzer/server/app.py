"""
TextPiper Studio

Flask front end for the analyzer: a text box whose report refreshes while
you type, plus a small JSON API. Run with `textpiper-studio` or
`python -m analyzer.server.app`, or start it from the shell with `studio`.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional

from flask import Flask

from analyzer.controllers.report_controller import ReportController
from analyzer.server.routers.page_router import page_router
from analyzer.server.routers.report_api_router import report_api_router
from textpiper_shell.core.managers.config_manager import config_manager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Application factory.

    The routers read their collaborators from app.config:
    REPORT_CONTROLLER builds the views, DEBOUNCE_MS is the page's typing
    delay and REJECT_BLANK_INPUT is the blank-input policy. `overrides` is
    applied last (tests use it to pin the policy).
    """
    flask_app = Flask(__name__)
    flask_app.config.update(
        REPORT_CONTROLLER=ReportController(
            frequent_words_shown=config_manager.get_nested("report.frequent_words_shown", 8)
        ),
        DEBOUNCE_MS=config_manager.get_nested("studio.debounce_ms", 1000),
        REJECT_BLANK_INPUT=config_manager.get_nested("analysis.reject_blank_input", True),
    )
    if overrides:
        flask_app.config.update(overrides)

    flask_app.register_blueprint(page_router)
    flask_app.register_blueprint(report_api_router, url_prefix='/api')
    return flask_app


def _route_summary(flask_app: Flask) -> List[str]:
    lines = []
    for rule in sorted(flask_app.url_map.iter_rules(), key=lambda r: r.rule):
        if rule.endpoint == "static":
            continue
        methods = ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"}))
        lines.append(f"   {methods:<5} {rule.rule}")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point of `textpiper-studio`; host and port default to the studio.* settings."""
    parser = argparse.ArgumentParser(description="TextPiper Studio")
    parser.add_argument("--host", default=config_manager.get_nested("studio.host", "127.0.0.1"),
                        help="Interface to bind (0.0.0.0 exposes Studio on the network).")
    parser.add_argument("--port", type=int, default=config_manager.get_nested("studio.port", 5000),
                        help="Port to listen on.")
    args = parser.parse_args(argv)

    app = create_app()

    print(f"\n📝 TextPiper Studio on http://{args.host}:{args.port}")
    print("\n".join(_route_summary(app)) + "\n")

    # No reloader: the shell starts Studio as a detached child process.
    app.run(host=args.host, port=args.port, debug=False, use_reloader=False)


if __name__ == '__main__':
    main()
