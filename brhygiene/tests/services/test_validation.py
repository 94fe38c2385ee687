import pytest
from brhygiene.services.validation import inquiry_validator
from brhygiene.tests.constants.inquiry import InquiryTestConstants
from brhygiene.utils import validators
from brhygiene.utils.validators import normalize_phone


class TestInquiryValidator:
    def test_valid_submission_is_normalized(self):
        result = inquiry_validator.validate(InquiryTestConstants.VALID_SUBMISSION.value)

        assert result.is_valid
        assert result.errors == {}
        assert result.inquiry.phone == InquiryTestConstants.NORMALIZED_PHONE.value
        assert result.inquiry.subject == "Bulk Order"

    def test_fields_are_trimmed(self):
        submission = {
            **InquiryTestConstants.VALID_SUBMISSION.value,
            "name": "  Jane Doe ",
            "email": " jane@co.com\n",
            "message": "\tNeed 500 units monthly.  ",
        }

        inquiry = inquiry_validator.validate(submission).inquiry

        assert inquiry.name == "Jane Doe"
        assert inquiry.email == "jane@co.com"
        assert inquiry.message == "Need 500 units monthly."

    @pytest.mark.parametrize("missing", InquiryTestConstants.REQUIRED_FIELDS.value)
    def test_missing_field_is_reported(self, missing):
        submission = dict(InquiryTestConstants.VALID_SUBMISSION.value)
        del submission[missing]

        result = inquiry_validator.validate(submission)

        assert result.inquiry is None
        assert list(result.errors) == [missing]

    def test_all_invalid_fields_reported_together(self):
        result = inquiry_validator.validate(
            {"name": "J", "email": "jane", "phone": "12345", "subject": " ", "message": "short"}
        )

        assert result.errors == {
            "name": validators.NAME_LENGTH_ERROR,
            "email": validators.EMAIL_ERROR,
            "phone": validators.PHONE_ERROR,
            "subject": validators.SUBJECT_ERROR,
            "message": validators.MESSAGE_ERROR,
        }

    @pytest.mark.parametrize("name", ["Jane3", "Jane_Doe", "Jane <Doe>", "Ja@ne"])
    def test_name_rejects_other_characters(self, name):
        result = inquiry_validator.validate({**InquiryTestConstants.VALID_SUBMISSION.value, "name": name})

        assert result.errors == {"name": validators.NAME_CHARACTERS_ERROR}

    def test_name_accepts_apostrophes_hyphens_periods(self):
        result = inquiry_validator.validate(
            {**InquiryTestConstants.VALID_SUBMISSION.value, "name": "Mary-Ann O'Brien Jr."}
        )

        assert result.is_valid

    @pytest.mark.parametrize(
        "email",
        ["janeco.com", "jane@co.c", "jane@mail.co.c", "a@b.c.d", "jane@co", "jane doe@co.com", "@co.com", ""],
    )
    def test_invalid_email_rejected(self, email):
        result = inquiry_validator.validate({**InquiryTestConstants.VALID_SUBMISSION.value, "email": email})

        assert result.errors == {"email": validators.EMAIL_ERROR}

    def test_message_length_counts_trimmed_text(self):
        result = inquiry_validator.validate(
            {**InquiryTestConstants.VALID_SUBMISSION.value, "message": "   too short    "}
        )

        assert result.errors == {"message": validators.MESSAGE_ERROR}

    @pytest.mark.parametrize(
        "subject,expected",
        [
            ("bulk order", "Bulk Order"),
            ("OEM / Private Label", "OEM / Private Label"),
            ("Distributor partnership", "Distributor partnership"),
        ],
    )
    def test_subject_accepts_listed_and_free_text(self, subject, expected):
        result = inquiry_validator.validate({**InquiryTestConstants.VALID_SUBMISSION.value, "subject": subject})

        assert result.inquiry.subject == expected

    def test_unknown_fields_are_ignored(self):
        result = inquiry_validator.validate(
            {**InquiryTestConstants.VALID_SUBMISSION.value, "company": "Acme", "id": "INQ-forged"}
        )

        assert result.is_valid
        assert not hasattr(result.inquiry, "company")

    def test_validation_is_idempotent(self):
        first = inquiry_validator.validate(InquiryTestConstants.VALID_SUBMISSION.value)
        second = inquiry_validator.validate(first.inquiry.model_dump())

        assert second.inquiry == first.inquiry
        assert inquiry_validator.validate(InquiryTestConstants.VALID_SUBMISSION.value) == first


class TestPhoneNormalization:
    @pytest.mark.parametrize(
        "raw",
        [
            "9876543210",
            "98765 43210",
            "98765-43210",
            "+91 98765 43210",
            "+91-98765-43210",
            "(+91) 98765.43210",
            "919876543210",
            " +91 (987) 654-3210 ",
            9876543210,
        ],
    )
    def test_equivalent_numbers_share_canonical_form(self, raw):
        assert normalize_phone(raw) == InquiryTestConstants.NORMALIZED_PHONE.value

    @pytest.mark.parametrize(
        "raw",
        [
            "12345",
            "5876543210",
            "0987654321",
            "98765432101",
            "9198765432100",
            "abcdefghij",
            "9\u0668\u0667\u0666\u0665\u0664\u0663\u0662\u0661\u0660",
            "\u096f\u096e\u096d\u096c\u096b\u096a\u0969\u0968\u0967\u0966",
            "",
            None,
        ],
    )
    def test_invalid_numbers(self, raw):
        assert normalize_phone(raw) is None

    def test_bare_country_code_without_prefix_is_kept(self):
        # ten digits starting with 91 are a number, not a prefix
        assert normalize_phone("9123456789") == "+91 91234 56789"
