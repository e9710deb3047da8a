from functools import wraps
import hmac
import math
import logging

from flask import Blueprint, current_app, jsonify, request

from app.models import FilterMode, InvalidFilterMode, MalformedPayload
from app.services.dashboard_service import build_dashboard

logger = logging.getLogger(__name__)

visualize_bp = Blueprint('visualize', __name__)


def require_token(view):
    """Bearer-token gate; only enforced when ANALYTICS_API_TOKEN is configured."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        expected = current_app.config.get('ANALYTICS_API_TOKEN')
        if expected:
            header = request.headers.get('Authorization', '')
            scheme, _, token = header.partition(' ')
            if scheme.lower() != 'bearer' or not hmac.compare_digest(token.strip().encode(), expected.encode()):
                return jsonify({'success': False, 'error': 'Missing or invalid session token'}), 401
        return view(*args, **kwargs)
    return wrapper


@visualize_bp.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@visualize_bp.route('/api/visualization/filters', methods=['GET'])
def list_filters():
    """Filter modes offered by the performance selector."""
    return jsonify({
        'success': True,
        'filters': [{'value': m.value, 'label': m.label} for m in FilterMode],
    })


@visualize_bp.route('/api/visualization/dashboard', methods=['POST'])
@require_token
def dashboard():
    """Build the dashboard view model from a query API payload posted as JSON."""
    try:
        mode = FilterMode.parse(request.args.get('filter', FilterMode.ALL.value))
    except InvalidFilterMode as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    radius = request.args.get('radius')
    if radius is not None:
        try:
            radius = float(radius)
        except ValueError:
            return jsonify({'success': False, 'error': f'Invalid radius: {radius}'}), 400
        if not math.isfinite(radius) or radius <= 0:
            return jsonify({'success': False, 'error': 'Radius must be a positive number'}), 400

    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({'success': False, 'error': 'Request body must be JSON'}), 400

    try:
        view = build_dashboard(payload, mode, radius)
    except MalformedPayload as e:
        logger.error(f"Rejected visualization payload: {e.message}")
        return jsonify({'success': False, 'error': e.message}), 422

    result = view.to_dict()
    result['success'] = True
    return jsonify(result)
