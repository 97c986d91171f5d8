import datetime

import pytest

from video_annotate_tool.formatters import (
    FORMATTERS,
    format_confidence,
    format_explicit_content,
    format_label_annotations,
    format_labels,
    format_offset,
    format_shots,
    format_transcriptions,
)
from video_annotate_tool.models import (
    AnnotationResult,
    ExplicitFrame,
    LabelAnnotation,
    LabelFrame,
    LabelSegment,
    SpeechTranscription,
    TimeSegment,
    TranscriptionAlternative,
    WordInfo,
)


@pytest.mark.parametrize("offset, expected", [
    (datetime.timedelta(0), "0s"),
    (datetime.timedelta(seconds=5), "5s"),
    (datetime.timedelta(seconds=1.5), "1.500s"),
    (datetime.timedelta(microseconds=250), "0.000250s"),
    (datetime.timedelta(minutes=2, milliseconds=40), "120.040s"),
    (datetime.timedelta(seconds=-1.5), "-1.500s"),
])
def test_format_offset(offset, expected):
    assert format_offset(offset) == expected


def test_format_confidence_uses_four_decimals():
    assert format_confidence(0.5) == "0.5000"
    assert format_confidence(0.87654321) == "0.8765"


def test_format_label_annotations_prints_categories_segments_and_frames():
    annotation = LabelAnnotation(
        description="dog",
        category_descriptions=["animal", "pet"],
        segments=[
            LabelSegment(
                segment=TimeSegment(
                    start_time_offset=datetime.timedelta(seconds=1),
                    end_time_offset=datetime.timedelta(seconds=2.5),
                ),
                confidence=0.9,
            )
        ],
        frames=[LabelFrame(time_offset=datetime.timedelta(seconds=3), confidence=0.25)],
    )

    assert format_label_annotations("Shot", [annotation]) == [
        "Shot label: dog",
        "Shot label category: animal",
        "Shot label category: pet",
        "Segment location: 1s:2.500s",
        "Confidence: 0.9000",
        "Frame location: 3s",
        "Confidence: 0.2500",
    ]


def test_format_labels_orders_video_shot_frame():
    result = AnnotationResult(
        frame_label_annotations=[LabelAnnotation(description="frame-label")],
        segment_label_annotations=[LabelAnnotation(description="video-label")],
        shot_label_annotations=[LabelAnnotation(description="shot-label")],
    )

    assert format_labels([result]) == [
        "Video label: video-label",
        "Shot label: shot-label",
        "Frame label: frame-label",
    ]


def test_format_shots():
    result = AnnotationResult(shot_annotations=[
        TimeSegment(start_time_offset=datetime.timedelta(0), end_time_offset=datetime.timedelta(seconds=4.2)),
    ])

    assert format_shots([result]) == ["Start Time Offset: 0s\tEnd Time Offset: 4.200s"]


def test_format_explicit_content_separates_frames_with_blank_lines():
    result = AnnotationResult(explicit_frames=[
        ExplicitFrame(time_offset=datetime.timedelta(seconds=1), pornography_likelihood="UNLIKELY"),
        ExplicitFrame(time_offset=datetime.timedelta(seconds=2), pornography_likelihood="LIKELY"),
    ])

    assert format_explicit_content([result]) == [
        "Time Offset: 1s",
        "Pornography Likelihood: UNLIKELY",
        "",
        "Time Offset: 2s",
        "Pornography Likelihood: LIKELY",
        "",
    ]


def test_format_transcriptions_lists_words_per_alternative():
    result = AnnotationResult(speech_transcriptions=[
        SpeechTranscription(alternatives=[
            TranscriptionAlternative(
                transcript="good morning",
                confidence=0.75,
                words=[
                    WordInfo(word="good", start_time=datetime.timedelta(0), end_time=datetime.timedelta(seconds=0.4)),
                    WordInfo(word="morning", start_time=datetime.timedelta(seconds=0.4), end_time=datetime.timedelta(seconds=1)),
                ],
            )
        ])
    ])

    assert format_transcriptions([result]) == [
        "Alternative level information:",
        "Transcript: good morning",
        "Confidence: 0.7500",
        "\t0s - 0.400s:good",
        "\t0.400s - 1s:morning",
    ]


def test_formatters_empty_results_produce_no_lines():
    for formatter in FORMATTERS.values():
        assert formatter([AnnotationResult()]) == []
        assert formatter([]) == []
