"""
Request Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import request, jsonify


def require_json(*fields):
    """
    Decorator rejecting requests whose JSON body lacks any of `fields`.

    The parsed body is passed to the view as the `data` keyword argument.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({
                    'success': False,
                    'error': 'Request body is required'
                }), 400

            missing = [field for field in fields if not data.get(field)]
            if missing:
                return jsonify({
                    'success': False,
                    'error': f"Missing required field(s): {', '.join(missing)}"
                }), 400

            kwargs['data'] = data
            return f(*args, **kwargs)

        return decorated_function
    return decorator
