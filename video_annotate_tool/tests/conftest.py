import datetime
from typing import Any, List, Optional

import pytest
from google.cloud import videointelligence

from video_annotate_tool.video_processor import analysis


def seconds(value: float) -> datetime.timedelta:
    return datetime.timedelta(seconds=value)


class FakeOperation:
    """Stands in for the long-running operation returned by annotate_video."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.timeouts: List[Any] = []

    def result(self, timeout=None):
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response


class FakeVideoIntelligenceClient:
    """Records requests and returns a canned response."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.requests: List[videointelligence.AnnotateVideoRequest] = []
        self.operation = FakeOperation(response, error)

    def annotate_video(self, request=None):
        self.requests.append(request)
        return self.operation


@pytest.fixture
def label_response():
    return videointelligence.AnnotateVideoResponse(
        annotation_results=[
            videointelligence.VideoAnnotationResults(
                input_uri="/bucket/cat.mp4",
                segment_label_annotations=[
                    videointelligence.LabelAnnotation(
                        entity=videointelligence.Entity(description="cat"),
                        category_entities=[videointelligence.Entity(description="animal")],
                        segments=[
                            videointelligence.LabelSegment(
                                segment=videointelligence.VideoSegment(
                                    start_time_offset=seconds(0),
                                    end_time_offset=seconds(14.833664),
                                ),
                                confidence=0.5,
                            )
                        ],
                    )
                ],
                shot_label_annotations=[
                    videointelligence.LabelAnnotation(
                        entity=videointelligence.Entity(description="whiskers"),
                        segments=[
                            videointelligence.LabelSegment(
                                segment=videointelligence.VideoSegment(
                                    start_time_offset=seconds(1.5),
                                    end_time_offset=seconds(3),
                                ),
                                confidence=0.25,
                            )
                        ],
                    )
                ],
                frame_label_annotations=[
                    videointelligence.LabelAnnotation(
                        entity=videointelligence.Entity(description="tail"),
                        frames=[
                            videointelligence.LabelFrame(time_offset=seconds(2), confidence=0.75)
                        ],
                    )
                ],
            )
        ]
    )


@pytest.fixture
def shot_response():
    return videointelligence.AnnotateVideoResponse(
        annotation_results=[
            videointelligence.VideoAnnotationResults(
                input_uri="/bucket/gbike.mp4",
                shot_annotations=[
                    videointelligence.VideoSegment(start_time_offset=seconds(0), end_time_offset=seconds(5.5)),
                    videointelligence.VideoSegment(start_time_offset=seconds(5.5), end_time_offset=seconds(10)),
                ],
            )
        ]
    )


@pytest.fixture
def explicit_response():
    return videointelligence.AnnotateVideoResponse(
        annotation_results=[
            videointelligence.VideoAnnotationResults(
                input_uri="/bucket/gbike.mp4",
                explicit_annotation=videointelligence.ExplicitContentAnnotation(
                    frames=[
                        videointelligence.ExplicitContentFrame(
                            time_offset=seconds(1),
                            pornography_likelihood=videointelligence.Likelihood.VERY_UNLIKELY,
                        ),
                        videointelligence.ExplicitContentFrame(
                            time_offset=seconds(2),
                            pornography_likelihood=videointelligence.Likelihood.POSSIBLE,
                        ),
                    ]
                ),
            )
        ]
    )


@pytest.fixture
def transcription_response():
    return videointelligence.AnnotateVideoResponse(
        annotation_results=[
            videointelligence.VideoAnnotationResults(
                input_uri="/bucket/speech.mp4",
                speech_transcriptions=[
                    videointelligence.SpeechTranscription(
                        language_code="en-us",
                        alternatives=[
                            videointelligence.SpeechRecognitionAlternative(
                                transcript="hello world",
                                confidence=0.875,
                                words=[
                                    videointelligence.WordInfo(
                                        word="hello", start_time=seconds(0.1), end_time=seconds(0.5)
                                    ),
                                    videointelligence.WordInfo(
                                        word="world", start_time=seconds(0.5), end_time=seconds(1)
                                    ),
                                ],
                            )
                        ],
                    )
                ],
            )
        ]
    )


@pytest.fixture
def install_client(monkeypatch):
    """Replace the Video Intelligence client class with a fake for one test."""

    def _install(response: Any = None, error: Optional[Exception] = None) -> FakeVideoIntelligenceClient:
        client = FakeVideoIntelligenceClient(response, error)
        monkeypatch.setattr(
            analysis.videointelligence, "VideoIntelligenceServiceClient", lambda *args, **kwargs: client
        )
        return client

    return _install


@pytest.fixture
def local_video(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path


@pytest.fixture
def make_client():
    """Factory for fake clients passed straight to VideoAnnotator."""
    return FakeVideoIntelligenceClient
