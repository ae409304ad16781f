"""
CSV reader for placement statistics files.

Header row becomes the keys; every cell is kept as a string.

- Rows longer than the header (a trailing comma from a spreadsheet
  export) keep their first fields under the header names; the extra
  field is dropped.
- Rows shorter than the header get "" for the missing cells.
- A repeated header name is suffixed by pandas (`ctc`, `ctc.1`) so both
  columns survive instead of the later one overwriting the earlier.
"""

from typing import Dict, List

import pandas as pd
from pandas.errors import EmptyDataError


def parse_csv_file(file_path: str) -> List[Dict[str, str]]:
    """Read a CSV file into a list of row dicts. An empty file gives []."""
    try:
        # ragged rows must not push the first column into the index
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False, index_col=False)
    except EmptyDataError:
        return []
    return frame.fillna("").to_dict(orient="records")
