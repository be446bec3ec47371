"""Roll Call: QR event check-in service."""
