"""
Text formatting for annotation results.

Every function returns a list of output lines; the CLI decides where they go.
"""

import datetime
from typing import List

from .config import LABEL_KINDS
from .models import AnnotationResult, LabelAnnotation


def format_offset(offset: datetime.timedelta) -> str:
    """
    Format a time offset the way protobuf renders a Duration in JSON.

    The fractional part uses 0, 3, 6 or 9 digits, e.g. ``5s``, ``1.500s``,
    ``0.000250s``.

    Args:
        offset: Offset from the start of the video

    Returns:
        str: The formatted duration
    """
    total_micros = (offset.days * 86400 + offset.seconds) * 1_000_000 + offset.microseconds
    sign = "-" if total_micros < 0 else ""
    seconds, micros = divmod(abs(total_micros), 1_000_000)

    if micros == 0:
        return f"{sign}{seconds}s"
    if micros % 1000 == 0:
        return f"{sign}{seconds}.{micros // 1000:03d}s"
    return f"{sign}{seconds}.{micros:06d}s"


def format_confidence(confidence: float) -> str:
    return f"{confidence:.4f}"


def format_label_annotations(kind: str, annotations: List[LabelAnnotation]) -> List[str]:
    """
    Format one list of label annotations.

    Args:
        kind: Display name for the label list (Video, Shot or Frame)
        annotations: Label annotations to format

    Returns:
        List[str]: Output lines
    """
    lines = []
    for annotation in annotations:
        lines.append(f"{kind} label: {annotation.description}")
        for category in annotation.category_descriptions:
            lines.append(f"{kind} label category: {category}")
        for label_segment in annotation.segments:
            segment = label_segment.segment
            lines.append(
                f"Segment location: {format_offset(segment.start_time_offset)}"
                f":{format_offset(segment.end_time_offset)}"
            )
            lines.append(f"Confidence: {format_confidence(label_segment.confidence)}")
        for frame in annotation.frames:
            lines.append(f"Frame location: {format_offset(frame.time_offset)}")
            lines.append(f"Confidence: {format_confidence(frame.confidence)}")
    return lines


def format_labels(results: List[AnnotationResult]) -> List[str]:
    lines = []
    for result in results:
        for kind, field_name in LABEL_KINDS:
            lines.extend(format_label_annotations(kind, getattr(result, field_name)))
    return lines


def format_shots(results: List[AnnotationResult]) -> List[str]:
    lines = []
    for result in results:
        for shot in result.shot_annotations:
            lines.append(
                f"Start Time Offset: {format_offset(shot.start_time_offset)}"
                f"\tEnd Time Offset: {format_offset(shot.end_time_offset)}"
            )
    return lines


def format_explicit_content(results: List[AnnotationResult]) -> List[str]:
    lines = []
    for result in results:
        for frame in result.explicit_frames:
            lines.append(f"Time Offset: {format_offset(frame.time_offset)}")
            lines.append(f"Pornography Likelihood: {frame.pornography_likelihood}")
            lines.append("")
    return lines


def format_transcriptions(results: List[AnnotationResult]) -> List[str]:
    """
    Format speech transcriptions.

    Each alternative is a different possible transcription with its own
    confidence; the number of alternatives is capped by the request's
    ``max_alternatives``.
    """
    lines = []
    for result in results:
        for transcription in result.speech_transcriptions:
            for alternative in transcription.alternatives:
                lines.append("Alternative level information:")
                lines.append(f"Transcript: {alternative.transcript}")
                lines.append(f"Confidence: {format_confidence(alternative.confidence)}")
                for word_info in alternative.words:
                    lines.append(
                        f"\t{format_offset(word_info.start_time)} - "
                        f"{format_offset(word_info.end_time)}:{word_info.word}"
                    )
    return lines


# Action name -> formatter
FORMATTERS = {
    "labels": format_labels,
    "shots": format_shots,
    "explicit_content": format_explicit_content,
    "transcribe": format_transcriptions,
}
