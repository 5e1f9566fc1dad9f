import pytest
from huggingface_hub import InferenceTimeoutError

from content_checker import config
from content_checker.errors import (
    ConfigurationError,
    ExternalServiceError,
    ExternalServiceUnavailable,
    InputValidationError,
)
from content_checker.utils import ai_detector
from content_checker.utils.ai_detector import (
    ai_verdict,
    detect_ai_content,
    interpret_predictions,
    validate_ai_text,
)
from tests.utils import FakeClassifier, hf_http_error


def test_interpret_nested_openai_detector_output():
    raw = [[{"label": "LABEL_0", "score": 0.2}, {"label": "LABEL_1", "score": 0.8}]]
    assert interpret_predictions(raw) == ("ai", 0.8)


def test_interpret_fake_real_labels():
    label, score = interpret_predictions([{"label": "Real", "score": 0.9}, {"label": "Fake", "score": 0.1}])
    assert label == "human"
    assert score == pytest.approx(0.1)


def test_interpret_human_only_prediction():
    label, score = interpret_predictions([{"label": "Human", "score": 0.9}])
    assert label == "human"
    assert score == pytest.approx(0.1)


def test_interpret_unknown_labels_uses_top_prediction():
    assert interpret_predictions([{"label": "class1", "score": 0.7}]) == ("ai", 0.7)
    assert interpret_predictions([{"label": "other", "score": 0.6}]) == ("human", 0.6)


def test_interpret_empty_output():
    assert interpret_predictions([]) == ("human", 0.0)
    assert interpret_predictions(None) == ("human", 0.0)


def test_validate_rejects_long_text():
    with pytest.raises(InputValidationError, match="Text cannot exceed 10000 characters"):
        validate_ai_text("a" * 10001)
    assert validate_ai_text("a" * 10000) == "a" * 10000


def test_validate_rejects_blank_text():
    with pytest.raises(InputValidationError, match="Text cannot be empty"):
        validate_ai_text("   ")


def test_detect_returns_label_score_and_raw(monkeypatch):
    monkeypatch.setattr(config, "HUGGINGFACE_MODEL", "test/model")
    classifier = FakeClassifier([{"label": "LABEL_1", "score": 0.93}, {"label": "LABEL_0", "score": 0.07}])

    result = detect_ai_content("This essay was written by a student.", client=classifier)

    assert result.label == "ai"
    assert result.score == 0.93
    assert result.raw == [{"label": "LABEL_1", "score": 0.93}, {"label": "LABEL_0", "score": 0.07}]
    assert classifier.calls == [{"text": "This essay was written by a student.", "model": "test/model"}]


def test_model_loading_maps_to_unavailable():
    classifier = FakeClassifier(error=hf_http_error(503))

    with pytest.raises(ExternalServiceUnavailable) as exc:
        detect_ai_content("Some text to classify.", client=classifier)

    assert exc.value.status_code == 503
    assert "loading" in exc.value.message


def test_inference_timeout_maps_to_unavailable():
    classifier = FakeClassifier(error=InferenceTimeoutError("Model not loaded yet"))

    with pytest.raises(ExternalServiceUnavailable):
        detect_ai_content("Some text to classify.", client=classifier)


def test_other_upstream_errors_keep_status():
    classifier = FakeClassifier(error=hf_http_error(429))

    with pytest.raises(ExternalServiceError) as exc:
        detect_ai_content("Some text to classify.", client=classifier)

    assert not isinstance(exc.value, ExternalServiceUnavailable)
    assert exc.value.status_code == 429
    assert exc.value.message == "Hugging Face API error: 429"


def test_missing_api_key_is_configuration_error(monkeypatch):
    monkeypatch.setattr(config, "HUGGINGFACE_API_KEY", "")
    monkeypatch.setattr(ai_detector, "_hf_client", None)

    with pytest.raises(ConfigurationError, match="API key not set"):
        ai_detector.get_hf_client()


def test_ai_verdict_bands():
    assert ai_verdict(0.7) == "Likely AI-Generated"
    assert ai_verdict(0.4) == "Possibly AI-Generated"
    assert ai_verdict(0.39) == "Likely Human-Written"


def test_detect_passes_model_output_through_untouched():
    output = [[{"label": "LABEL_0", "score": 0.6}, {"label": "LABEL_1", "score": 0.4}]]

    result = detect_ai_content("A paragraph from a thesis draft.", client=FakeClassifier(output))

    assert result.raw is output
    assert (result.label, result.score) == ("human", 0.4)
