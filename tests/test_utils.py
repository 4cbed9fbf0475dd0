"""
Tests for prompt templates, LLM JSON extraction and upload checks.
"""

import pytest

from studypace.utils import (
    MAX_UPLOAD_BYTES,
    extract_json_from_response,
    format_file_size,
    format_prompt,
    get_available_prompts,
    load_prompt,
    validate_pdf_upload,
)


class TestPromptLoader:

    def test_shipped_prompts(self):
        assert get_available_prompts() == [
            "breakdown_homework",
            "chunk_reading",
            "detect_questions",
            "summarize_material",
        ]

    @pytest.mark.parametrize("name, values", [
        ("chunk_reading", {"grade_name": "Grade 5", "target_words": 300, "target_minutes": 2, "text": "T"}),
        ("detect_questions", {"text": "T"}),
        ("summarize_material", {"grade_name": "Grade 5", "text": "T"}),
        ("breakdown_homework", {"grade_name": "Grade 5", "questions": "1. Q"}),
    ])
    def test_templates_format(self, name, values):
        prompt = load_prompt(name)
        assert prompt["system"].strip()
        assert 0 <= prompt["meta"]["temperature"] <= 1
        rendered = format_prompt(prompt["user_template"], **values)
        assert "{" in rendered  # literal JSON braces survive formatting
        assert "{grade_name}" not in rendered

    def test_missing_prompt(self):
        with pytest.raises(FileNotFoundError):
            load_prompt("does_not_exist")

    def test_template_missing_keys(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("meta:\n  version: '1'\nsystem: hi\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_prompt("broken", prompts_dir=tmp_path)

    def test_custom_dir_listing(self, tmp_path):
        assert get_available_prompts(tmp_path / "missing") == []
        (tmp_path / "a.yaml").write_text("system: s\nuser_template: u\n", encoding="utf-8")
        assert get_available_prompts(tmp_path) == ["a"]
        assert load_prompt("a", prompts_dir=tmp_path)["user_template"] == "u"


class TestExtractJson:

    def test_code_block_array(self):
        text = 'Sure!\n```json\n[{"index": 1}]\n```\nLet me know.'
        assert extract_json_from_response(text) == [{"index": 1}]

    def test_code_block_without_language(self):
        assert extract_json_from_response('```\n{"a": 1}\n```') == {"a": 1}

    def test_raw_object_with_trailing_text(self):
        assert extract_json_from_response('{"a": {"b": 2}} hope this helps') == {"a": {"b": 2}}

    def test_array_after_chatter(self):
        text = 'Here you go: [{"prompt": "Why [really]?"}] Done.'
        assert extract_json_from_response(text) == [{"prompt": "Why [really]?"}]

    def test_braces_inside_strings(self):
        assert extract_json_from_response('{"text": "a } b", "n": 1}') == {"text": "a } b", "n": 1}

    def test_invalid(self):
        with pytest.raises(ValueError):
            extract_json_from_response("no json here")
        with pytest.raises(ValueError):
            extract_json_from_response("")


class TestUploads:

    def test_valid_pdf(self):
        assert validate_pdf_upload("application/pdf", 2048) == (True, None)

    def test_wrong_type(self):
        valid, error = validate_pdf_upload("image/png", 2048)
        assert not valid
        assert error == "File must be a PDF"

    def test_too_large(self):
        assert validate_pdf_upload("application/pdf", MAX_UPLOAD_BYTES)[0]
        valid, error = validate_pdf_upload("application/pdf", MAX_UPLOAD_BYTES + 1)
        assert not valid
        assert "10MB" in error

    def test_file_size_display(self):
        assert format_file_size(512) == "512 B"
        assert format_file_size(1536) == "1.5 KB"
        assert format_file_size(2 * 1024 * 1024) == "2.0 MB"
