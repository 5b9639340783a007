import logging
import os

from marshmallow import ValidationError
from werkzeug.utils import secure_filename

from matrixcalc.utils.sparse_matrix import OPERATIONS, apply_operation, load, loads, save

logger = logging.getLogger(__name__)

OPERAND_FIELDS = {
    'A': ('matrixAFile', 'matrixA'),
    'B': ('matrixBFile', 'matrixB'),
}


class MatrixService:
    """Loads operands, runs an operation and optionally stores the result"""

    def __init__(self, data_dir=None):
        self.data_dir = data_dir

    def resolve_path(self, path):
        """Resolves a relative path against the configured data directory"""
        if self.data_dir and not os.path.isabs(path):
            return os.path.join(self.data_dir, path)
        return path

    def validate_operation(self, operation):
        if not operation or not isinstance(operation, str):
            raise ValidationError('Operation is required')
        name = operation.strip().lower()
        if name not in OPERATIONS:
            raise ValidationError('Invalid operation. Use add, subtract, or multiply.')
        return name

    def load_operand(self, data, label):
        """
        Builds one operand from a request payload.

        Args:
            data (dict): Request payload
            label (str): 'A' or 'B'

        Returns:
            SparseMatrix: Loaded operand

        Raises:
            ValidationError: If neither a path nor inline contents are given
            FormatError: If the contents are malformed
            OSError: If the file cannot be read
        """
        path_field, text_field = OPERAND_FIELDS[label]
        path = data.get(path_field)
        text = data.get(text_field)

        if path:
            if not isinstance(path, str):
                raise ValidationError(f'{path_field} must be a string')
            return load(self.resolve_path(path))
        if text:
            if not isinstance(text, str):
                raise ValidationError(f'{text_field} must be a string')
            return loads(text)
        raise ValidationError('Matrix file paths are required')

    def perform(self, operation, matrix_a, matrix_b):
        """Runs a validated operation on two matrices"""
        name = self.validate_operation(operation)
        result = apply_operation(name, matrix_a, matrix_b)
        logger.info("%s: %r, %r -> %r", name, matrix_a, matrix_b, result)
        return result

    def save_result(self, matrix, path):
        """Saves a result under the data directory using a sanitized file name"""
        if not isinstance(path, str):
            raise ValidationError('outputFile must be a string')
        filename = secure_filename(path)
        if not filename:
            raise ValidationError('outputFile is not a valid file name')
        target = os.path.join(self.data_dir or os.getcwd(), filename)
        save(matrix, target)
        return target

    def run(self, data):
        """
        Handles a full operation request.

        Args:
            data (dict): Payload with 'operation', the operand fields and an
                optional 'outputFile'

        Returns:
            tuple: (operation name, result matrix, saved path or None)
        """
        if not data or not isinstance(data, dict):
            raise ValidationError('No data provided')

        name = self.validate_operation(data.get('operation'))
        matrix_a = self.load_operand(data, 'A')
        matrix_b = self.load_operand(data, 'B')
        result = self.perform(name, matrix_a, matrix_b)

        saved_to = None
        if data.get('outputFile'):
            saved_to = self.save_result(result, data['outputFile'])
        return name, result, saved_to
