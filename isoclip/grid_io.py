"""Loading gridded samples from text tables."""

from typing import List, Optional, TextIO, Union

import numpy as np

from .geometry import Point


def load_grid(source: Union[str, TextIO], delimiter: Optional[str] = None) -> List[Point]:
    """Read ``x y z`` rows into points carrying their value as ``z``.

    Columns are separated by whitespace, or by commas when the first line
    contains one and no delimiter is given. Lines starting with ``#`` are
    ignored.
    """
    if isinstance(source, str):
        with open(source, 'r') as f:
            return load_grid(f, delimiter)

    lines = [line for line in source if line.strip() and not line.lstrip().startswith('#')]
    if not lines:
        return []
    if delimiter is None and ',' in lines[0]:
        delimiter = ','

    data = np.loadtxt(lines, delimiter=delimiter, ndmin=2)
    if data.shape[1] < 3:
        raise ValueError(f"Grid rows need x, y and z columns, got {data.shape[1]}")

    return [Point(float(x), float(y), float(z)) for x, y, z in data[:, :3]]
