"""
Two-step orchestration: analyze a video, then render its infographic.
"""

from typing import Callable, Optional

from app.models.schemas import AppStatus, GenerationResult, VisualStyle
from app.utils.error_handling import EmptyInputError, RequestInProgressError, user_message
from app.utils.logger import logging


class InfographicPipeline:
    """
    Runs one generation request at a time and tracks its status.

    ``analyzer`` needs ``analyze(video_url, style, custom_style_prompt)`` and
    ``illustrator`` needs ``generate(image_prompt)``. Both the in-process
    Gemini classes and the HTTP ``ApiClient`` fit.
    """

    def __init__(self, analyzer, illustrator, on_status: Optional[Callable[[AppStatus], None]] = None):
        self.analyzer = analyzer
        self.illustrator = illustrator
        self.on_status = on_status
        self.status = AppStatus.IDLE
        self.result: Optional[GenerationResult] = None
        self.error: Optional[str] = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def _set_status(self, status: AppStatus) -> None:
        logging.info(f"Status: {self.status.value} -> {status.value}")
        self.status = status
        if self.on_status:
            self.on_status(status)

    def reset(self) -> None:
        self.result = None
        self.error = None
        self._set_status(AppStatus.IDLE)

    def generate(
        self,
        video_url: str,
        style: VisualStyle,
        custom_style_prompt: Optional[str] = None,
    ) -> GenerationResult:
        """
        Analyze a video and render its infographic.

        Args:
            video_url: YouTube URL
            style: Visual style of the infographic
            custom_style_prompt: Free-text style used with VisualStyle.CUSTOM

        Returns:
            GenerationResult, also kept on ``self.result``
        """
        if self._busy:
            raise RequestInProgressError()

        if not video_url or not video_url.strip():
            error = EmptyInputError()
            self.error = user_message(error)
            raise error

        self._busy = True
        self.result = None
        self.error = None
        try:
            self._set_status(AppStatus.ANALYZING)
            analysis = self.analyzer.analyze(video_url.strip(), style, custom_style_prompt)

            self._set_status(AppStatus.GENERATING)
            image_url = self.illustrator.generate(analysis.image_prompt)

            self.result = GenerationResult(
                image_url=image_url,
                summary=analysis.summary,
                video_title=analysis.video_title,
            )
            self._set_status(AppStatus.COMPLETE)
            return self.result
        except Exception as e:
            self.error = user_message(e)
            logging.error(f"Generation failed during {self.status.value}: {self.error}")
            self._set_status(AppStatus.ERROR)
            raise
        finally:
            self._busy = False
