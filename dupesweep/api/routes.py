"""
Flask routes for the dupesweep GUI.

Contains all API endpoints for the web interface.
"""

from __future__ import annotations

import threading
import logging
from datetime import datetime

from flask import Blueprint, jsonify, request, render_template

from ..config import OPTIONAL_EXTENSIONS
from ..models import ConfigurationError, ScanConfig, normalize_extensions
from ..state import scan_state
from ..user_config import get_user_config
from ..utils import validators
from ..utils.platform import open_folder
from .orchestrator import ScanOrchestrator, move_duplicates

# Create blueprint for routes
api = Blueprint('api', __name__)

# Module logger
_logger = logging.getLogger(__name__)


def _extension_choices() -> dict:
    defaults = sorted(normalize_extensions(get_user_config().default_extensions))
    optional = sorted(normalize_extensions(OPTIONAL_EXTENSIONS) - set(defaults))
    return {'default': defaults, 'optional': optional}


# =============================================================================
# Route Handlers
# =============================================================================

@api.route('/')
def index():
    """Serve the main HTML page."""
    return render_template('index.html', extensions=_extension_choices())


@api.route('/api/ping')
def api_ping():
    """Simple endpoint for connection monitoring."""
    return jsonify({'status': 'ok', 'time': datetime.now().isoformat()})


@api.route('/api/extensions')
def api_extensions():
    """Return the extensions offered as check boxes."""
    return jsonify(_extension_choices())


@api.route('/api/scan', methods=['POST'])
def api_scan():
    """Start a new scan in the background."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body required'}), 400

    directory = str(data.get('directory', '')).strip()
    max_distance = data.get('maxDistance')
    workers = data.get('workers')
    extensions = data.get('extensions')

    if extensions is not None and (
        not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions)
    ):
        return jsonify({'error': 'Extensions must be a list of strings'}), 400

    is_valid, error = validators.validate_scan_params(
        directory=directory,
        max_distance=max_distance,
        workers=workers,
        extensions=extensions,
    )
    if not is_valid:
        return jsonify({'error': error}), 400

    try:
        config = ScanConfig.from_user_config(
            extensions=extensions,
            max_distance=int(max_distance) if max_distance is not None else None,
            workers=int(workers) if workers is not None else None,
        )
        config.validate()
    except ConfigurationError as e:
        return jsonify({'error': str(e)}), 400

    if not scan_state.begin(directory):
        return jsonify({'error': 'A scan is already running'}), 409

    orchestrator = ScanOrchestrator(scan_state=scan_state, directory=directory, config=config)

    thread = threading.Thread(target=orchestrator.run, name='dupesweep-scan')
    thread.daemon = True
    thread.start()

    return jsonify({'status': 'started'})


@api.route('/api/cancel', methods=['POST'])
def api_cancel():
    """Cancel the current scan."""
    if scan_state.is_running:
        scan_state.request_cancel()
        return jsonify({'status': 'cancel_requested'})
    return jsonify({'status': 'no_scan_running'})


@api.route('/api/status')
def api_status():
    """Return current scan status and progress."""
    return jsonify(scan_state.to_status_dict())


@api.route('/api/log')
def api_log():
    """Return log lines starting at ?since=N."""
    since = request.args.get('since', 0, type=int)
    lines, next_index = scan_state.log_since(since)
    return jsonify({'lines': lines, 'next': next_index})


@api.route('/api/move', methods=['POST'])
def api_move():
    """Move the duplicates of the last scan into its quarantine folder."""
    if scan_state.is_running:
        return jsonify({'error': 'A scan is still running'}), 409
    if scan_state.status != 'complete' or not scan_state.duplicates:
        return jsonify({'error': 'No duplicates to move'}), 400

    try:
        report = move_duplicates(scan_state)
    except OSError as e:
        _logger.error(f"Error while moving duplicates: {e}")
        return jsonify({'error': f'Error while moving: {e}'}), 500

    return jsonify({
        'status': 'moved',
        'message': scan_state.message,
        'report': report.to_dict(),
    })


@api.route('/api/open', methods=['POST'])
def api_open():
    """Open the quarantine folder in the system file browser."""
    folder = scan_state.duplicate_folder
    if not folder or not open_folder(folder):
        return jsonify({'error': 'Duplicates folder not found'}), 404
    return jsonify({'status': 'opened', 'folder': folder})
