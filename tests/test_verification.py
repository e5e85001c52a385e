import pytest

from krishi_ai.fallbacks.verification import classify_batch_code, image_verification_fallback
from krishi_ai.models.assembly import AssemblyState, FallbackReason, ResultSource
from krishi_ai.models.language import Language
from krishi_ai.models.verification import VerificationStatus
from krishi_ai.services.verification_service import verify_batch_code, verify_product_image


@pytest.mark.parametrize(
    "code, status, confidence",
    [
        ("FAKE2024X01", VerificationStatus.FAKE, 95),
        ("recall2024", VerificationStatus.FAKE, 95),
        ("AZ2024X12", VerificationStatus.GENUINE, 90),
        ("???", VerificationStatus.SUSPICIOUS, 75),
        ("az2024x99", VerificationStatus.SUSPICIOUS, 75),
        ("KR2023A123", VerificationStatus.UNKNOWN, 50),
    ],
)
def test_classify_batch_code(code, status, confidence):
    result = classify_batch_code(code, Language.ENGLISH)
    assert result.status is status
    assert result.confidence == confidence
    assert result.batch_code == code


def test_batch_code_text_is_localized():
    result = classify_batch_code("FAKE2024X01", Language.HINDI)
    assert result.reasoning == "यह बैच कोड नकली उत्पादों की सूची में पाया गया है। इसे न खरीदें।"
    assert result.manufacturer == "Unknown"


def test_image_fallback_has_zero_confidence():
    result = image_verification_fallback(Language.HINDI)
    assert result.status is VerificationStatus.UNKNOWN
    assert result.confidence == 0
    assert result.batch_code == "N/A"
    assert result.product_name == "विश्लेषण विफल"


@pytest.mark.asyncio
async def test_verify_batch_code_is_rule_based():
    result = await verify_batch_code("AZ2024X12")
    assert result.source is ResultSource.RULES
    assert result.state is AssemblyState.ASSEMBLED
    assert result.value.status is VerificationStatus.GENUINE


@pytest.mark.asyncio
async def test_image_verification_accepts_model_answer(stub_generator):
    stub_generator.response = """```json
{"status": "genuine", "productName": "Urea 45kg", "manufacturer": "IFFCO",
 "batchCode": "IF2024MR15", "confidence": "82", "reasoning": "Clear logo and hologram",
 "safetyCheck": "Store dry", "onlineEvidence": "Matches packaging"}
```"""
    result = await verify_product_image("aGVsbG8=", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.AI
    assert result.value.status is VerificationStatus.GENUINE
    assert result.value.confidence == 82
    assert result.value.product_name == "Urea 45kg"
    assert result.value.sources == []
    assert stub_generator.images == ["aGVsbG8="]


@pytest.mark.asyncio
async def test_image_verification_rejects_incomplete_document(stub_generator):
    stub_generator.response = '{"status": "GENUINE", "confidence": 90}'
    result = await verify_product_image("aGVsbG8=", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.FALLBACK
    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH
    assert result.value.confidence == 0


@pytest.mark.asyncio
async def test_image_verification_survives_model_error(stub_generator):
    stub_generator.error = RuntimeError("quota exceeded")
    result = await verify_product_image("aGVsbG8=", generator=stub_generator)

    assert result.state is AssemblyState.FAILED_FALLBACK
    assert result.fallback_reason is FallbackReason.MODEL_ERROR
    assert result.value.reasoning == "छवि विश्लेषण पूर्ण नहीं हो सका। कृपया स्पष्ट तस्वीर भेजें।"


@pytest.mark.asyncio
async def test_image_verification_confidence_out_of_range(stub_generator):
    stub_generator.response = (
        '{"status": "FAKE", "productName": "X", "manufacturer": "Y", "confidence": 140,'
        ' "reasoning": "r", "safetyCheck": "s"}'
    )
    result = await verify_product_image("aGVsbG8=", generator=stub_generator)
    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH
