# /club_admin/services/student_helpers/file_processors.py

"""
Turns an uploaded student list into plain row dictionaries keyed by the
`StudentCreate` field names.

Spreadsheets exported from the office come with English or Greek headers,
so each field is looked up under several column names, first match wins.
"""

import io
from typing import Dict, List, Optional, Sequence

import pandas as pd

COLUMN_ALIASES: Dict[str, Sequence[str]] = {
    "firstName": ("firstName", "First Name", "Όνομα"),
    "lastName": ("lastName", "Last Name", "Επώνυμο"),
    "phone": ("phone", "Phone", "Τηλέφωνο"),
    "email": ("email", "Email"),
    "guardianName": ("guardianName", "Guardian Name", "Κηδεμόνας"),
}


def _first_present(row: Dict[str, str], headers: Sequence[str]) -> Optional[str]:
    for header in headers:
        value = row.get(header)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def read_csv_rows(file_bytes: bytes) -> List[Dict[str, str]]:
    """Parses CSV bytes into one dict per data row, every cell as a string."""
    try:
        text = file_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValueError("The uploaded file is not valid UTF-8 text.") from e

    if not text.strip():
        raise ValueError("The uploaded file is empty.")

    try:
        df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False, skip_blank_lines=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ValueError(f"Could not parse the CSV file: {e}") from e

    df.columns = [str(column).strip() for column in df.columns]
    return df.to_dict(orient="records")


def extract_students_from_csv(file_bytes: bytes) -> List[Dict[str, str]]:
    """
    Maps every CSV row onto the student fields. Blank cells are left out, so
    a missing required value surfaces as "field required" during validation.
    """
    students = []
    for row in read_csv_rows(file_bytes):
        mapped = {field: _first_present(row, headers) for field, headers in COLUMN_ALIASES.items()}
        students.append({field: value for field, value in mapped.items() if value is not None})
    return students


def students_to_csv(rows: List[Dict[str, object]], columns: Sequence[str]) -> str:
    df = pd.DataFrame(rows, columns=list(columns)) if rows else pd.DataFrame(columns=list(columns))
    return df.to_csv(index=False)
