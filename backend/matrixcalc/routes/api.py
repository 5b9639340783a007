from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from matrixcalc.services.matrix_service import MatrixService
from matrixcalc.utils.helpers import generate_response, matrix_summary
from matrixcalc.utils.sparse_matrix import DimensionMismatch, FormatError, loads

api_bp = Blueprint('api', __name__, url_prefix='/api/v1')


def get_matrix_service():
    return MatrixService(current_app.config.get('MATRIX_DATA_DIR'))


def error_response(error, status):
    return jsonify(generate_response(success=False, error=error)), status


def handle_operation_error(e):
    """Translates core and validation errors into an HTTP response"""
    if isinstance(e, ValidationError):
        return error_response(str(e.messages[0] if isinstance(e.messages, list) else e.messages), 400)
    if isinstance(e, FormatError):
        current_app.logger.warning("Rejected matrix input: %s", e)
        return error_response(str(e), 400)
    if isinstance(e, DimensionMismatch):
        current_app.logger.warning("Incompatible operands: %s", e)
        return error_response(str(e), 400)
    if isinstance(e, FileNotFoundError):
        return error_response(f'Matrix file not found: {e.filename}', 404)
    current_app.logger.exception("Matrix operation failed")
    return error_response(f'Error performing operation: {str(e)}', 500)


@api_bp.route('/matrix/operation', methods=['POST'])
def matrix_operation():
    """Run add/subtract/multiply on two matrices given as paths or text"""
    data = request.get_json(silent=True)
    matrix_service = get_matrix_service()

    try:
        name, result, saved_to = matrix_service.run(data)
    except (ValidationError, FormatError, DimensionMismatch, OSError) as e:
        return handle_operation_error(e)

    payload = matrix_summary(result, name)
    if saved_to:
        payload['saved_to'] = saved_to
    return jsonify(generate_response(data=payload)), 200


@api_bp.route('/matrix/operation/upload', methods=['POST'])
def matrix_operation_upload():
    """Run an operation on two uploaded matrix files"""
    for field in ('matrixA', 'matrixB'):
        if field not in request.files:
            return error_response(f'No file provided for {field}', 400)
        if request.files[field].filename == '':
            return error_response(f'No file selected for {field}', 400)

    matrix_service = get_matrix_service()
    operation = request.form.get('operation')

    try:
        name = matrix_service.validate_operation(operation)
        operands = []
        for field in ('matrixA', 'matrixB'):
            try:
                contents = request.files[field].read().decode('utf-8')
            except UnicodeDecodeError:
                return error_response(f'{field} is not a UTF-8 text file', 400)
            operands.append(loads(contents))
        result = matrix_service.perform(name, *operands)
    except (ValidationError, FormatError, DimensionMismatch) as e:
        return handle_operation_error(e)

    return jsonify(generate_response(data=matrix_summary(result, name))), 200
