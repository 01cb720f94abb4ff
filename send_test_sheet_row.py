# send_test_sheet_row.py

from datetime import datetime, timezone

from app.core.config import get_settings
from app.core.sheets_client import AppendStatus, append_rows


def main():
    settings = get_settings()
    print("Appending a test row to Google Sheets...")

    result = append_rows(
        settings.GOOGLE_SHEET_ID,
        settings.PRODUCT_LOG_RANGE,
        [
            ["TEST-0001", "Test Product Name", 10.99, 1, datetime.now(timezone.utc).isoformat()],
        ],
    )

    if result.status == AppendStatus.APPENDED:
        print("Row appended! Check the sheet.")
    else:
        print(f"Row not appended ({result.status.value}). Check GOOGLE_SHEET_ID / GOOGLE_APPLICATION_CREDENTIALS.")

if __name__ == "__main__":
    main()
