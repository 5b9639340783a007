from datetime import datetime, timezone


def generate_response(success=True, data=None, message=None, error=None):
    """Generate standardized API response"""
    response = {
        'success': success,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    if error:
        response['error'] = error

    return response


def matrix_summary(matrix, operation=None):
    """Serializable summary of a result matrix"""
    summary = {
        'rows': matrix.rows,
        'cols': matrix.cols,
        'non_zero': matrix.nnz,
        'density': round(matrix.get_density(), 4),
        'result': matrix.to_string()
    }
    if operation:
        summary['operation'] = operation
    return summary
