import logging
import os

logger = logging.getLogger(__name__)


class FormatError(ValueError):
    """Raised when matrix text cannot be parsed."""

    def __init__(self, message, line=None, line_number=None, source=None):
        self.message = message
        self.line = line
        self.line_number = line_number
        self.source = source
        super().__init__(str(self))

    def __str__(self):
        text = self.message
        if self.line_number is not None:
            text = f"{text} at line {self.line_number}: {self.line!r}"
        if self.source is not None:
            text = f"Error loading matrix from file '{self.source}': {text}"
        return text


class DimensionMismatch(ValueError):
    """Raised when operand shapes are incompatible for an operation."""

    def __init__(self, operation, left_shape, right_shape):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        if operation == 'multiply':
            reason = "Matrix dimensions are not compatible for multiplication"
        else:
            reason = "Matrix dimensions do not match for this operation"
        super().__init__(
            f"{reason}: {left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}"
        )


class SparseMatrix:
    """
    Sparse matrix that stores only non-zero elements in a dictionary.

    Keys are ``(row, col)`` tuples; a value of zero is never stored.
    """

    def __init__(self, rows=0, cols=0):
        """
        Initializes an empty sparse matrix with the given dimensions.

        Args:
            rows (int): Number of rows
            cols (int): Number of columns
        """
        self.rows = rows
        self.cols = cols
        self.elements = {}  # (row, col) -> value

    def set_value(self, row, col, value):
        """
        Sets the value at the given position.

        Setting zero removes any stored entry. Coordinates are not checked
        against the dimensions.

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)
            value (int/float): Value to store
        """
        if value != 0:
            self.elements[(row, col)] = value
        else:
            self.elements.pop((row, col), None)

    def get_value(self, row, col):
        """
        Gets the value at the given position.

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)

        Returns:
            int/float: Value at (row, col), 0 if nothing is stored there
        """
        return self.elements.get((row, col), 0)

    get = get_value
    set = set_value

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def nnz(self):
        return len(self.elements)

    def get_density(self):
        """
        Computes the density of the matrix (percentage of non-zero cells).

        Returns:
            float: Density as a percentage
        """
        total_elements = self.rows * self.cols
        return (self.nnz / total_elements) * 100 if total_elements > 0 else 0

    def add(self, other):
        """
        Adds another sparse matrix to this one.

        Args:
            other (SparseMatrix): Matrix to add

        Returns:
            SparseMatrix: New matrix holding the result

        Raises:
            DimensionMismatch: If the shapes differ
        """
        self._validate_dimensions(other, 'add')
        return self._merge(other, lambda a, b: a + b)

    def subtract(self, other):
        """
        Subtracts another sparse matrix from this one.

        Args:
            other (SparseMatrix): Matrix to subtract

        Returns:
            SparseMatrix: New matrix holding the result

        Raises:
            DimensionMismatch: If the shapes differ
        """
        self._validate_dimensions(other, 'subtract')
        return self._merge(other, lambda a, b: a - b)

    def multiply(self, other):
        """
        Multiplies this matrix by another sparse matrix.

        Only non-zero entries of both operands are visited.

        Args:
            other (SparseMatrix): Right-hand matrix

        Returns:
            SparseMatrix: New ``self.rows x other.cols`` matrix

        Raises:
            DimensionMismatch: If ``self.cols != other.rows``
        """
        if self.cols != other.rows:
            raise DimensionMismatch('multiply', self.shape, other.shape)

        # Group the right operand by row so each left entry (i, k) only
        # touches the non-zero columns of row k.
        other_rows = {}
        for (k, j), value in other.elements.items():
            other_rows.setdefault(k, []).append((j, value))

        result = SparseMatrix(self.rows, other.cols)
        for (i, k), value1 in self.elements.items():
            for j, value2 in other_rows.get(k, ()):
                result.set_value(i, j, result.get_value(i, j) + value1 * value2)

        return result

    def _validate_dimensions(self, other, operation):
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatch(operation, self.shape, other.shape)

    def _merge(self, other, operation):
        result = SparseMatrix(self.rows, self.cols)

        for coord, value in self.elements.items():
            result.elements[coord] = value

        for (r, c), value in other.elements.items():
            result.set_value(r, c, operation(result.get_value(r, c), value))

        return result

    def copy(self):
        result = SparseMatrix(self.rows, self.cols)
        result.elements = self.elements.copy()
        return result

    def to_string(self):
        """
        Converts the matrix to its text format.

        Returns:
            str: ``rows=``/``cols=`` headers followed by one triple per entry
        """
        lines = [f"rows={self.rows}", f"cols={self.cols}"]
        for (row, col), value in self.elements.items():
            lines.append(f"({row}, {col}, {value})")
        return "\n".join(lines)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __matmul__(self, other):
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows == other.rows and self.cols == other.cols
                and self.elements == other.elements)

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"SparseMatrix({self.rows}x{self.cols}, {self.nnz} non-zero elements)"


def _parse_int(token, what, line, line_number):
    try:
        return int(token.strip())
    except ValueError:
        raise FormatError(f"Invalid {what} {token.strip()!r}", line, line_number) from None


def loads(contents):
    """
    Parses a matrix from its text format.

    Args:
        contents (str | iterable of str): Whole file contents or its lines

    Returns:
        SparseMatrix: Parsed matrix

    Raises:
        FormatError: On a malformed line or a non-integer token
    """
    if isinstance(contents, str):
        contents = contents.splitlines()

    matrix = SparseMatrix()
    for line_number, raw in enumerate(contents, start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith('rows='):
            matrix.rows = _parse_int(line[len('rows='):], 'number of rows', line, line_number)
            if matrix.rows < 0:
                raise FormatError("Negative number of rows", line, line_number)
        elif line.startswith('cols='):
            matrix.cols = _parse_int(line[len('cols='):], 'number of columns', line, line_number)
            if matrix.cols < 0:
                raise FormatError("Negative number of columns", line, line_number)
        elif line.startswith('(') and line.endswith(')'):
            tokens = line[1:-1].split(',')
            if len(tokens) != 3:
                raise FormatError("Input file has wrong format", line, line_number)
            row = _parse_int(tokens[0], 'row index', line, line_number)
            col = _parse_int(tokens[1], 'column index', line, line_number)
            value = _parse_int(tokens[2], 'value', line, line_number)
            if row < 0 or col < 0:
                raise FormatError("Negative coordinate", line, line_number)
            matrix.set_value(row, col, value)
        else:
            raise FormatError("malformed line", line, line_number)

    logger.debug("Parsed %r", matrix)
    return matrix


def load(path):
    """
    Reads a matrix file.

    Args:
        path (str | os.PathLike): File to read

    Returns:
        SparseMatrix: Parsed matrix

    Raises:
        FormatError: If the contents are malformed or not UTF-8 text
            (``source`` is set to path)
        OSError: If the file cannot be read
    """
    with open(path, encoding='utf-8') as handle:
        try:
            return loads(handle)
        except FormatError as e:
            e.source = os.fspath(path)
            raise
        except UnicodeDecodeError as e:
            raise FormatError(f"File is not UTF-8 text ({e.reason})",
                              source=os.fspath(path)) from e


def to_display_string(matrix):
    return matrix.to_string()


def save(matrix, path):
    """Writes ``matrix`` to ``path`` in the text format."""
    with open(path, 'w', encoding='utf-8') as handle:
        handle.write(matrix.to_string() + "\n")
    logger.debug("Saved %r to %s", matrix, path)


def add(a, b):
    return a.add(b)


def subtract(a, b):
    return a.subtract(b)


def multiply(a, b):
    return a.multiply(b)


OPERATIONS = {
    'add': add,
    'subtract': subtract,
    'multiply': multiply,
}


def apply_operation(name, a, b):
    """
    Runs the operation called ``name`` on two matrices.

    Raises:
        ValueError: If the operation name is unknown
    """
    try:
        operation = OPERATIONS[name.strip().lower()]
    except KeyError:
        raise ValueError("Invalid operation. Use add, subtract, or multiply.") from None
    return operation(a, b)


def create_sparse_matrix_from_data(rows, cols, data_dict):
    """
    Creates a sparse matrix from a dictionary.

    Args:
        rows (int): Number of rows
        cols (int): Number of columns
        data_dict (dict): Keys are (row, col) tuples or 'row,col' strings

    Returns:
        SparseMatrix: New sparse matrix
    """
    matrix = SparseMatrix(rows, cols)
    for key, value in data_dict.items():
        if isinstance(key, str):
            row, col = map(int, key.split(','))
        else:
            row, col = key
        matrix.set_value(row, col, value)
    return matrix


def create_identity_matrix(size):
    """
    Creates an identity matrix of the given size.

    Args:
        size (int): Number of rows and columns

    Returns:
        SparseMatrix: Identity matrix
    """
    matrix = SparseMatrix(size, size)
    for i in range(size):
        matrix.set_value(i, i, 1)
    return matrix


def create_zero_matrix(rows, cols):
    return SparseMatrix(rows, cols)
