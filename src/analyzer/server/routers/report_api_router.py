import logging
from flask import Blueprint, jsonify, request, current_app

from analyzer.controllers.analysis_controller import analyze
from analyzer.services.readability_service import get_readability_label
from analyzer.utils.input_policy import EMPTY_INPUT_MESSAGE, prepare_input
from analyzer.utils.sample_text import SAMPLE_TEXT

logger = logging.getLogger(__name__)

report_api_router = Blueprint('report_api_router', __name__)


# --- API ROUTES ---

@report_api_router.route('/analyze', methods=['POST'])
def analyze_text():
    """
    Analyzes the JSON body {"text": "..."} and returns the full report
    together with its readability label.
    """
    payload = request.get_json(silent=True) or {}
    raw_text = payload.get('text')
    if raw_text is not None and not isinstance(raw_text, str):
        return jsonify({"error": "'text' must be a string"}), 400

    text = prepare_input(raw_text, reject_blank=current_app.config.get('REJECT_BLANK_INPUT', True))
    if text is None:
        return jsonify({"error": EMPTY_INPUT_MESSAGE}), 400

    report = analyze(text)
    label = get_readability_label(report.readability.flesch_score)
    logger.info("API analysis: %d words, %d sentences.", report.basic.words, report.basic.sentences)

    return jsonify({
        "report": report.model_dump(mode="json"),
        "readability_label": label.model_dump(),
    })


@report_api_router.route('/sample', methods=['GET'])
def get_sample():
    """Returns the canned demonstration text."""
    return jsonify({"text": SAMPLE_TEXT})
