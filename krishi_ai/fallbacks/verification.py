import re

from krishi_ai.core.templates import get_label
from krishi_ai.models.verification import VerificationResult, VerificationStatus

KNOWN_COUNTERFEIT_CODES = frozenset(
    {
        "FAKE2024X01",
        "XX2024F001",
        "RECALL2024",
        "TEST123456",
        "00000000",
        "12345678",
        "ABCDEFGH",
    }
)

KNOWN_GENUINE_CODES = frozenset(
    {
        "AZ2024X12",
        "NK2024Y45",
        "DCNP202401",
        "BS2024SE01",
        "IF2024MR15",
        "UPL2024GJ08",
        "SUM2024KA22",
    }
)

# Manufacturer prefix, year, optional series letter, lot number.
_STANDARD_CODE_RE = re.compile(r"^[A-Z]{2,4}\d{4}[A-Z]?\d{1,3}$")
_EXTENDED_CODE_RE = re.compile(r"^[A-Z]{2,8}\d{2,4}[A-Z0-9]{0,4}$")

CONFIDENCE = {
    VerificationStatus.FAKE: 95,
    VerificationStatus.GENUINE: 90,
    VerificationStatus.SUSPICIOUS: 75,
    VerificationStatus.UNKNOWN: 50,
}


def has_valid_format(code: str) -> bool:
    # Matched against the code as typed; lowercase input is not normalized.
    return bool(_STANDARD_CODE_RE.match(code) or _EXTENDED_CODE_RE.match(code))


def batch_code_status(code: str) -> VerificationStatus:
    normalized = code.upper()
    if normalized in KNOWN_COUNTERFEIT_CODES:
        return VerificationStatus.FAKE
    if normalized in KNOWN_GENUINE_CODES:
        return VerificationStatus.GENUINE
    if not has_valid_format(code):
        return VerificationStatus.SUSPICIOUS
    return VerificationStatus.UNKNOWN


def classify_batch_code(code: str, language) -> VerificationResult:
    """Judge a printed batch code with local rules only; no model is consulted."""
    status = batch_code_status(code)
    return VerificationResult(
        status=status,
        product_name=get_label(language, "verification_fallback.batch_code.product_name"),
        manufacturer=get_label(language, "verification_fallback.unknown_manufacturer"),
        batch_code=code,
        confidence=CONFIDENCE[status],
        reasoning=get_label(
            language, f"verification_fallback.batch_code.reasoning.{status.value}"
        ),
        safety_check=get_label(language, "verification_fallback.batch_code.safety_check"),
        online_evidence=get_label(
            language, "verification_fallback.batch_code.online_evidence"
        ),
    )


def image_verification_fallback(language) -> VerificationResult:
    return VerificationResult(
        status=VerificationStatus.UNKNOWN,
        product_name=get_label(language, "verification_fallback.image.product_name"),
        manufacturer=get_label(language, "verification_fallback.unknown_manufacturer"),
        batch_code=get_label(language, "verification_fallback.not_available"),
        confidence=0,
        reasoning=get_label(language, "verification_fallback.image.reasoning"),
        safety_check=get_label(language, "verification_fallback.image.safety_check"),
        online_evidence=get_label(language, "verification_fallback.image.online_evidence"),
    )
