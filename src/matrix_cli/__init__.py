"""matrix-cli — basic operations on tab-delimited integer matrices.

Dimensions, transpose, column means, element-wise addition and matrix
multiplication, built as a strictly layered command-line tool.
"""

from matrix_cli.version import __version__

__all__: list[str] = ["__version__"]
