import pytest
from pydantic import ValidationError

from conftest import SAMPLE_JD, SAMPLE_RESUME, VALID_API_KEY
from models.requests import AnalysisRequest, Language
from services.prompt_builder import assemble, build_user_prompt
from services.system_prompt import LANGUAGE_INSTRUCTIONS, RUBRIC


def _request(language=Language.PT) -> AnalysisRequest:
    return AnalysisRequest(
        job_description=SAMPLE_JD.strip(),
        resume=SAMPLE_RESUME.strip(),
        api_key=VALID_API_KEY,
        language=language,
    )


def test_user_prompt_contains_both_texts_in_order():
    prompt = build_user_prompt("the job", "the resume")
    assert prompt.index("JOB DESCRIPTION:") < prompt.index("the job")
    assert prompt.index("the job") < prompt.index("RESUME:") < prompt.index("the resume")


def test_assemble_is_deterministic():
    assert assemble(_request()) == assemble(_request())


def test_language_selects_instruction():
    pt = assemble(_request(Language.PT))
    en = assemble(_request(Language.EN))
    assert pt.system_instruction.startswith(LANGUAGE_INSTRUCTIONS[Language.PT])
    assert en.system_instruction.startswith(LANGUAGE_INSTRUCTIONS[Language.EN])
    assert RUBRIC in pt.system_instruction and RUBRIC in en.system_instruction
    assert pt.user_content == en.user_content


def test_generation_parameters():
    payload = assemble(_request())
    assert payload.temperature == 0.3
    assert payload.top_k == 40
    assert payload.top_p == 0.95
    assert payload.max_output_tokens == 4096
    assert payload.response_mime_type == "application/json"


def test_credential_not_in_payload():
    payload = assemble(_request())
    assert VALID_API_KEY not in payload.model_dump_json()


def test_payload_is_immutable():
    payload = assemble(_request())
    with pytest.raises(ValidationError):
        payload.temperature = 1.0
