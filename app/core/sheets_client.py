# app/core/sheets_client.py
"""
Google Sheets client utilities for the Marxia backend.

Responsibilities:
  - Read the credentials path from settings.
  - Provide a single append_rows(...) function for services to use.
  - Never raise: every outcome is reported as an AppendResult.

Typical .env configuration:

    GOOGLE_APPLICATION_CREDENTIALS=/secrets/marxia-sheets.json
    GOOGLE_SHEET_ID=1AbC...xyz
    PRODUCT_LOG_RANGE=ProductLog!A1

The target tab ("ProductLog" above) must already exist in the spreadsheet.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import google.auth
from googleapiclient.discovery import build

from app.core.config import get_settings

settings = get_settings()

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class AppendStatus(str, Enum):
    APPENDED = "appended"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class AppendResult:
    """
    Outcome of append_rows().

    `response` holds the Sheets API response body when rows were appended.
    """

    status: AppendStatus
    response: dict[str, Any] | None = None


def _build_sheets_service():
    """
    Authenticate with the configured credentials file and build a Sheets v4 client.

    Raises:
        google.auth.exceptions.DefaultCredentialsError: if the file is missing/invalid.
    """
    credentials, _project = google.auth.load_credentials_from_file(
        settings.GOOGLE_APPLICATION_CREDENTIALS,
        scopes=SHEETS_SCOPES,
    )
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def append_rows(sheet_id: str | None, range_: str, rows: list[list[Any]]) -> AppendResult:
    """
    Append rows after the last populated row of `range_`.

    Parameters
    ----------
    sheet_id:
        Spreadsheet id. Empty/None => skipped.
    range_:
        A1 notation used to locate the table, e.g. "ProductLog!A1" or "ProductLog".
    rows:
        2D list of values; each inner list is one row.

    Values are interpreted as if typed by a user (USER_ENTERED) and new rows
    are inserted (INSERT_ROWS), so existing rows are never overwritten.

    Usage in services:
        from app.core.sheets_client import append_rows

        append_rows(settings.GOOGLE_SHEET_ID, "ProductLog!A1", [[...]])
    """
    logger.info("Attempting to append to Google Sheet...")

    if not settings.GOOGLE_APPLICATION_CREDENTIALS:
        logger.warning(
            "GOOGLE_APPLICATION_CREDENTIALS not set. Skipping Google Sheets operation."
        )
        return AppendResult(status=AppendStatus.SKIPPED)

    if not sheet_id:
        logger.warning("Google Sheet ID is not provided. Skipping Google Sheets operation.")
        return AppendResult(status=AppendStatus.SKIPPED)

    try:
        service = _build_sheets_service()
        logger.info("Appending to Sheet ID: %s, Range: %s, Values: %s", sheet_id, range_, rows)
        response = (
            service.spreadsheets()
            .values()
            .append(
                spreadsheetId=sheet_id,
                range=range_,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                body={"values": rows},
            )
            .execute()
        )
    except Exception as e:
        # Auth, HTTP and transport errors all end up here; the caller never sees them.
        logger.error("Error appending to Google Sheet: %s", e)
        return AppendResult(status=AppendStatus.FAILED)

    logger.info("Successfully appended to Google Sheet: %s", response)
    return AppendResult(status=AppendStatus.APPENDED, response=response)
