import logging
from flask import Blueprint, render_template, current_app, request

from analyzer.controllers.analysis_controller import analyze
from analyzer.utils.input_policy import EMPTY_INPUT_MESSAGE, prepare_input
from analyzer.utils.sample_text import SAMPLE_TEXT

logger = logging.getLogger(__name__)

# Blueprint for handling HTML page rendering
page_router = Blueprint('page_router', __name__)


@page_router.route('/')
def index():
    """
    Renders the main page with the sample text preloaded and analyzed.
    Further analyses are requested by the page itself via '/results'.
    """
    controller = current_app.config['REPORT_CONTROLLER']
    view = controller.build_view(analyze(SAMPLE_TEXT))

    return render_template(
        'index.html',
        text=SAMPLE_TEXT,
        view=view,
        debounce_ms=current_app.config.get('DEBOUNCE_MS', 1000),
    )


@page_router.route('/results', methods=['POST'])
def results():
    """
    Renders the results fragment for the submitted form text.
    Blank input renders the empty-state message instead of a report.
    """
    text = prepare_input(
        request.form.get('text'),
        reject_blank=current_app.config.get('REJECT_BLANK_INPUT', True)
    )
    if text is None:
        return render_template('_results.html', view=None, message=EMPTY_INPUT_MESSAGE)

    controller = current_app.config['REPORT_CONTROLLER']
    view = controller.build_view(analyze(text))
    logger.debug("Rendered results for %d characters of input.", len(text))
    return render_template('_results.html', view=view, message=None)
