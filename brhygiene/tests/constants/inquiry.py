from enum import Enum


class InquiryTestConstants(Enum):
    VALID_SUBMISSION = {
        "name": "Jane Doe",
        "email": "jane@co.com",
        "phone": "9876543210",
        "subject": "Bulk Order",
        "message": "Need 500 units monthly.",
    }
    NORMALIZED_PHONE = "+91 98765 43210"
    INQUIRY_ID_PATTERN = r"^INQ-\d{14}-[0-9A-F]{8}$"
    REQUIRED_FIELDS = ("name", "email", "phone", "subject", "message")
    MOCK_INQUIRY_ID = "INQ-20250301093015-3F9A1C2B"
    MOCK_CREATED_AT = "2025-03-01T09:30:15Z"
    MOCK_SES_RESPONSE = {"MessageId": "0100018e-ses-message-id"}
