"""
Video annotation for the video annotate tool.

This module sends videos to the Google Cloud Video Intelligence API and waits
for the long-running annotation operation to finish.
"""

import enum
from pathlib import Path
from typing import Any, List, Optional

import structlog
from google.cloud import videointelligence

from ..config import STORAGE_URI_PREFIX, DEFAULT_LANGUAGE_CODE, DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION

logger = structlog.get_logger(__name__)


class LabelMode(str, enum.Enum):
    """Label detection modes accepted on the command line."""
    SHOT = "shot"
    FRAME = "frame"
    SHOT_AND_FRAME = "shot-and-frame"

    def to_proto(self) -> videointelligence.LabelDetectionMode:
        return {
            LabelMode.SHOT: videointelligence.LabelDetectionMode.SHOT_MODE,
            LabelMode.FRAME: videointelligence.LabelDetectionMode.FRAME_MODE,
            LabelMode.SHOT_AND_FRAME: videointelligence.LabelDetectionMode.SHOT_AND_FRAME_MODE,
        }[self]


def is_storage_uri(uri: str) -> bool:
    """Return True when ``uri`` points at Cloud Storage (``gs://bucket/object``)."""
    return uri[:len(STORAGE_URI_PREFIX)].lower() == STORAGE_URI_PREFIX


class VideoAnnotator:
    """Client wrapper around the Video Intelligence ``annotate_video`` call."""

    def __init__(self, client: Any = None, timeout: Optional[float] = None):
        """
        Initialize the video annotator.

        Args:
            client: A VideoIntelligenceServiceClient; created on first use when None
            timeout: Seconds to wait for the operation; None waits with the client default
        """
        self.logger = logger
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = videointelligence.VideoIntelligenceServiceClient()
        return self._client

    def build_request(
        self,
        feature: videointelligence.Feature,
        uri: str,
        video_context: Optional[videointelligence.VideoContext] = None,
    ) -> videointelligence.AnnotateVideoRequest:
        """
        Build an annotation request for a single feature.

        Storage URIs are sent as ``input_uri``; anything else is read as a
        local file and sent inline as ``input_content``.

        Args:
            feature: The feature to request
            uri: Cloud Storage URI or local file path
            video_context: Optional feature configuration

        Returns:
            videointelligence.AnnotateVideoRequest: The request
        """
        request = videointelligence.AnnotateVideoRequest(features=[feature])
        if is_storage_uri(uri):
            request.input_uri = uri
        else:
            content = Path(uri).read_bytes()
            self.logger.debug("Read video for inline content", path=uri, size_bytes=len(content))
            request.input_content = content
        if video_context is not None:
            request.video_context = video_context
        return request

    def annotate(self, request: videointelligence.AnnotateVideoRequest) -> List[Any]:
        """
        Run the annotation and block until the operation completes.

        Args:
            request: The annotation request

        Returns:
            List of VideoAnnotationResults messages, one per video
        """
        features = [videointelligence.Feature(f).name for f in request.features]
        self.logger.info("Sending annotation request", features=features, input_uri=request.input_uri or None)
        operation = self.client.annotate_video(request=request)

        operation_name = getattr(getattr(operation, "operation", None), "name", None)
        self.logger.info("Waiting for operation to complete", operation=operation_name, timeout=self.timeout)
        if self.timeout is None:
            response = operation.result()
        else:
            response = operation.result(timeout=self.timeout)

        results = list(response.annotation_results)
        self.logger.info("Annotation finished", result_count=len(results))
        return results

    def analyze_labels(self, uri: str, mode: Optional[LabelMode] = None) -> List[Any]:
        video_context = None
        if mode is not None:
            video_context = videointelligence.VideoContext(
                label_detection_config=videointelligence.LabelDetectionConfig(
                    label_detection_mode=LabelMode(mode).to_proto(),
                )
            )
        request = self.build_request(videointelligence.Feature.LABEL_DETECTION, uri, video_context)
        return self.annotate(request)

    def analyze_shots(self, uri: str) -> List[Any]:
        request = self.build_request(videointelligence.Feature.SHOT_CHANGE_DETECTION, uri)
        return self.annotate(request)

    def analyze_explicit_content(self, uri: str) -> List[Any]:
        request = self.build_request(videointelligence.Feature.EXPLICIT_CONTENT_DETECTION, uri)
        return self.annotate(request)

    def transcribe(
        self,
        uri: str,
        language_code: str = DEFAULT_LANGUAGE_CODE,
        enable_automatic_punctuation: bool = DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION,
        max_alternatives: Optional[int] = None,
    ) -> List[Any]:
        """
        Request a speech transcription of the video's audio track.

        Args:
            uri: Cloud Storage URI of the video
            language_code: BCP-47 language of the speech
            enable_automatic_punctuation: Ask the service to add punctuation
            max_alternatives: Upper bound on alternatives per transcription

        Returns:
            List of VideoAnnotationResults messages
        """
        config = videointelligence.SpeechTranscriptionConfig(
            language_code=language_code,
            enable_automatic_punctuation=enable_automatic_punctuation,
        )
        if max_alternatives is not None:
            config.max_alternatives = max_alternatives
        video_context = videointelligence.VideoContext(speech_transcription_config=config)
        request = self.build_request(videointelligence.Feature.SPEECH_TRANSCRIPTION, uri, video_context)
        return self.annotate(request)
