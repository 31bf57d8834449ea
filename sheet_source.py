import json
import logging

from google.oauth2 import service_account
from googleapiclient.discovery import build

from errors import UpstreamFetchError

logger = logging.getLogger(__name__)

SHEETS_READONLY_SCOPES = ("https://www.googleapis.com/auth/spreadsheets.readonly",)


class IdentityProvider:
    """Supplies Google credentials for the sheet reader."""

    def credentials(self, scopes):
        raise NotImplementedError


class ServiceAccountIdentity(IdentityProvider):
    def __init__(self, raw_json):
        self.raw_json = raw_json

    def credentials(self, scopes=SHEETS_READONLY_SCOPES):
        if not self.raw_json:
            raise UpstreamFetchError("GOOGLE_SERVICE_ACCOUNT_JSON environment variable is not set")

        try:
            # First parse: unwrap string if the blob was stored double-encoded
            parsed = json.loads(self.raw_json)
            info = json.loads(parsed) if isinstance(parsed, str) else parsed
            return service_account.Credentials.from_service_account_info(info, scopes=scopes)
        except Exception as e:
            raise UpstreamFetchError(f"Failed to load service account: {e}") from e


class SheetsReader:
    def __init__(self, identity):
        self.identity = identity

    def fetch_rows(self, sheet_id, sheet_range):
        if not sheet_id:
            raise UpstreamFetchError("No spreadsheet id given and SHEET_ID is not set")

        creds = self.identity.credentials(SHEETS_READONLY_SCOPES)
        try:
            sheets_svc = build("sheets", "v4", credentials=creds, cache_discovery=False).spreadsheets()
            resp = sheets_svc.values().get(spreadsheetId=sheet_id, range=sheet_range).execute()
        except Exception as e:
            raise UpstreamFetchError(f"Failed to read sheet: {e}") from e

        rows = resp.get("values") or []
        logger.info("Got %d rows from %s (%s)", len(rows), sheet_id, sheet_range)
        return rows
