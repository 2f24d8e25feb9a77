"""
Integration tests for the generation pipeline.
"""

import pytest
from unittest.mock import MagicMock

from app.core.analyzer import VideoAnalyzer
from app.core.illustrator import InfographicGenerator
from app.core.pipeline import InfographicPipeline
from app.models.schemas import AnalysisResponse, AppStatus, GenerationResult, VisualStyle
from app.utils.error_handling import (
    EmptyInputError,
    ModelReportedError,
    NoImageDataError,
    RequestInProgressError,
)


@pytest.fixture
def fake_analyzer():
    analyzer = MagicMock()
    analyzer.analyze.return_value = AnalysisResponse(
        videoTitle="Test Video", summary="1. a\n2. b\n3. c", imagePrompt="draw it"
    )
    return analyzer


@pytest.fixture
def fake_illustrator():
    illustrator = MagicMock()
    illustrator.generate.return_value = "data:image/png;base64,QQ=="
    return illustrator


def test_end_to_end_with_mocked_models(
    mock_genai_client, text_response, image_response, image_part, valid_analysis_text, test_video_url
):
    """Test the full flow from URL to result with both model calls mocked."""
    mock_genai_client.models.generate_content.side_effect = [
        text_response(valid_analysis_text),
        image_response(image_part),
    ]
    statuses = []
    pipeline = InfographicPipeline(
        VideoAnalyzer(client=mock_genai_client),
        InfographicGenerator(client=mock_genai_client),
        on_status=statuses.append,
    )
    assert pipeline.status == AppStatus.IDLE

    result = pipeline.generate(test_video_url, VisualStyle.WHITEBOARD)

    assert statuses == [AppStatus.ANALYZING, AppStatus.GENERATING, AppStatus.COMPLETE]
    assert isinstance(result, GenerationResult)
    assert result.image_url.startswith("data:image/png;base64,")
    assert result.video_title == "How Fusion Works"
    assert pipeline.result is result
    assert pipeline.error is None
    assert mock_genai_client.models.generate_content.call_count == 2


def test_image_step_receives_analysis_prompt(fake_analyzer, fake_illustrator):
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)

    pipeline.generate("https://youtu.be/XYZ789", VisualStyle.CUSTOM, "Neon")

    fake_analyzer.analyze.assert_called_once_with("https://youtu.be/XYZ789", VisualStyle.CUSTOM, "Neon")
    fake_illustrator.generate.assert_called_once_with("draw it")


def test_analysis_failure_sets_error(fake_analyzer, fake_illustrator):
    """Test that a failing first step stops the flow with the message intact."""
    fake_analyzer.analyze.side_effect = ModelReportedError("video not found")
    statuses = []
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator, on_status=statuses.append)

    with pytest.raises(ModelReportedError):
        pipeline.generate("https://youtu.be/XYZ789", VisualStyle.WHITEBOARD)

    assert statuses == [AppStatus.ANALYZING, AppStatus.ERROR]
    assert pipeline.error == "video not found"
    assert pipeline.result is None
    fake_illustrator.generate.assert_not_called()
    assert not pipeline.busy


def test_image_failure_exposes_no_partial_result(fake_analyzer, fake_illustrator):
    fake_illustrator.generate.side_effect = NoImageDataError()
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)

    with pytest.raises(NoImageDataError):
        pipeline.generate("https://youtu.be/XYZ789", VisualStyle.NOTEBOOK)

    assert pipeline.status == AppStatus.ERROR
    assert pipeline.result is None
    assert pipeline.error == "No image data found in response."


def test_unexpected_failure_message_is_kept(fake_analyzer, fake_illustrator):
    fake_analyzer.analyze.side_effect = RuntimeError("connection reset")
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)

    with pytest.raises(RuntimeError):
        pipeline.generate("https://youtu.be/XYZ789", VisualStyle.WHITEBOARD)

    assert pipeline.error == "connection reset"


@pytest.mark.parametrize("url", ["", "   "])
def test_empty_url(fake_analyzer, fake_illustrator, url):
    """Test that a blank URL is rejected before any model call."""
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)

    with pytest.raises(EmptyInputError):
        pipeline.generate(url, VisualStyle.WHITEBOARD)

    assert pipeline.status == AppStatus.IDLE
    assert pipeline.error == "Please enter a valid YouTube URL."
    fake_analyzer.analyze.assert_not_called()


def test_new_request_replaces_previous_result(fake_analyzer, fake_illustrator):
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)
    first = pipeline.generate("https://youtu.be/one", VisualStyle.WHITEBOARD)

    fake_analyzer.analyze.return_value = AnalysisResponse(summary="other", imagePrompt="p2")
    second = pipeline.generate("https://youtu.be/two", VisualStyle.WHITEBOARD)

    assert pipeline.result is second
    assert second is not first
    assert second.summary == "other"
    assert second.video_title is None


def test_busy_pipeline_rejects_second_request(fake_analyzer, fake_illustrator):
    """Test the busy flag while a request is in flight."""
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)

    def reenter(*args):
        assert pipeline.busy
        with pytest.raises(RequestInProgressError):
            pipeline.generate("https://youtu.be/two", VisualStyle.WHITEBOARD)
        return AnalysisResponse(summary="s", imagePrompt="p")

    fake_analyzer.analyze.side_effect = reenter

    pipeline.generate("https://youtu.be/one", VisualStyle.WHITEBOARD)

    assert fake_analyzer.analyze.call_count == 1
    assert pipeline.status == AppStatus.COMPLETE
    assert not pipeline.busy


def test_reset(fake_analyzer, fake_illustrator):
    pipeline = InfographicPipeline(fake_analyzer, fake_illustrator)
    pipeline.generate("https://youtu.be/one", VisualStyle.WHITEBOARD)

    pipeline.reset()

    assert pipeline.status == AppStatus.IDLE
    assert pipeline.result is None
