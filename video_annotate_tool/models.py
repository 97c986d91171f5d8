"""
Models for the video annotate tool.

Contains the Pydantic models used to carry annotation results from the
Video Intelligence responses to the text formatters and JSON output.
"""

import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from google.cloud import videointelligence

# ===== Shared Models =====

class TimeSegment(BaseModel):
    """A start/end offset pair relative to the beginning of the video"""
    start_time_offset: datetime.timedelta = datetime.timedelta(0)
    end_time_offset: datetime.timedelta = datetime.timedelta(0)

    @classmethod
    def from_proto(cls, segment: Any) -> "TimeSegment":
        return cls(
            start_time_offset=segment.start_time_offset,
            end_time_offset=segment.end_time_offset,
        )

# ===== Label Models =====

class LabelSegment(BaseModel):
    segment: TimeSegment
    confidence: float = 0.0

class LabelFrame(BaseModel):
    time_offset: datetime.timedelta = datetime.timedelta(0)
    confidence: float = 0.0

class LabelAnnotation(BaseModel):
    """A detected label with its categories and where it was seen"""
    description: str
    category_descriptions: List[str] = Field(default_factory=list)
    segments: List[LabelSegment] = Field(default_factory=list)
    frames: List[LabelFrame] = Field(default_factory=list)

    @classmethod
    def from_proto(cls, annotation: Any) -> "LabelAnnotation":
        return cls(
            description=annotation.entity.description,
            category_descriptions=[entity.description for entity in annotation.category_entities],
            segments=[
                LabelSegment(segment=TimeSegment.from_proto(s.segment), confidence=s.confidence)
                for s in annotation.segments
            ],
            frames=[
                LabelFrame(time_offset=f.time_offset, confidence=f.confidence)
                for f in annotation.frames
            ],
        )

# ===== Explicit Content Models =====

class ExplicitFrame(BaseModel):
    time_offset: datetime.timedelta = datetime.timedelta(0)
    pornography_likelihood: str = "LIKELIHOOD_UNSPECIFIED"

    @classmethod
    def from_proto(cls, frame: Any) -> "ExplicitFrame":
        try:
            likelihood = videointelligence.Likelihood(frame.pornography_likelihood).name
        except ValueError:
            # Values added to the service after this client release
            likelihood = str(frame.pornography_likelihood)
        return cls(time_offset=frame.time_offset, pornography_likelihood=likelihood)

# ===== Speech Transcription Models =====

class WordInfo(BaseModel):
    word: str
    start_time: datetime.timedelta = datetime.timedelta(0)
    end_time: datetime.timedelta = datetime.timedelta(0)
    confidence: float = 0.0
    speaker_tag: int = 0

class TranscriptionAlternative(BaseModel):
    transcript: str = ""
    confidence: float = 0.0
    words: List[WordInfo] = Field(default_factory=list)

class SpeechTranscription(BaseModel):
    """Transcription of one portion of the audio track"""
    language_code: str = ""
    alternatives: List[TranscriptionAlternative] = Field(default_factory=list)

    @classmethod
    def from_proto(cls, transcription: Any) -> "SpeechTranscription":
        return cls(
            language_code=transcription.language_code,
            alternatives=[
                TranscriptionAlternative(
                    transcript=alternative.transcript,
                    confidence=alternative.confidence,
                    words=[
                        WordInfo(
                            word=w.word,
                            start_time=w.start_time,
                            end_time=w.end_time,
                            confidence=w.confidence,
                            speaker_tag=w.speaker_tag,
                        )
                        for w in alternative.words
                    ],
                )
                for alternative in transcription.alternatives
            ],
        )

# ===== Result Model =====

class AnnotationResult(BaseModel):
    """Annotations returned for a single video"""
    input_uri: str = ""
    segment_label_annotations: List[LabelAnnotation] = Field(default_factory=list)
    shot_label_annotations: List[LabelAnnotation] = Field(default_factory=list)
    frame_label_annotations: List[LabelAnnotation] = Field(default_factory=list)
    shot_annotations: List[TimeSegment] = Field(default_factory=list)
    explicit_frames: List[ExplicitFrame] = Field(default_factory=list)
    speech_transcriptions: List[SpeechTranscription] = Field(default_factory=list)
    error_message: Optional[str] = None

    @classmethod
    def from_proto(cls, result: Any) -> "AnnotationResult":
        """
        Copy the printable fields of a ``VideoAnnotationResults`` message.

        Args:
            result: A VideoAnnotationResults message

        Returns:
            AnnotationResult: The converted result
        """
        error_message = None
        if result.error.code:
            error_message = result.error.message or f"error code {result.error.code}"

        return cls(
            input_uri=result.input_uri,
            segment_label_annotations=[LabelAnnotation.from_proto(a) for a in result.segment_label_annotations],
            shot_label_annotations=[LabelAnnotation.from_proto(a) for a in result.shot_label_annotations],
            frame_label_annotations=[LabelAnnotation.from_proto(a) for a in result.frame_label_annotations],
            shot_annotations=[TimeSegment.from_proto(s) for s in result.shot_annotations],
            explicit_frames=[ExplicitFrame.from_proto(f) for f in result.explicit_annotation.frames],
            speech_transcriptions=[SpeechTranscription.from_proto(t) for t in result.speech_transcriptions],
            error_message=error_message,
        )
