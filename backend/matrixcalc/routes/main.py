from flask import Blueprint, jsonify

from matrixcalc import __version__

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Root endpoint"""
    return jsonify({
        'message': 'Sparse Matrix Calculator API',
        'version': __version__,
        'status': 'running'
    })


@main_bp.route('/health')
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'message': 'API is running successfully'
    })


@main_bp.route('/api-info')
def api_info():
    """API information endpoint"""
    return jsonify({
        'name': 'Sparse Matrix Calculator API',
        'version': __version__,
        'description': 'Add, subtract and multiply sparse matrices stored as text files',
        'operations': ['add', 'subtract', 'multiply'],
        'endpoints': {
            'main': '/',
            'health': '/health',
            'api_info': '/api-info',
            'operation': '/api/v1/matrix/operation',
            'operation_upload': '/api/v1/matrix/operation/upload'
        }
    })
