from matrixcalc.utils.sparse_matrix import (
    DimensionMismatch,
    FormatError,
    SparseMatrix,
    add,
    apply_operation,
    load,
    loads,
    multiply,
    save,
    subtract,
    to_display_string,
)

__all__ = [
    'DimensionMismatch',
    'FormatError',
    'SparseMatrix',
    'add',
    'apply_operation',
    'load',
    'loads',
    'multiply',
    'save',
    'subtract',
    'to_display_string',
]
