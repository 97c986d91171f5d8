"""
Annotate command class for API-friendly video annotation.

This module provides the AnnotateCommand class that validates the input,
runs one Video Intelligence feature and converts the response into result
models.
"""

import os
from typing import Dict, Any, Optional

import structlog

from . import BaseCommand
from ..models import AnnotationResult
from ..video_processor import VideoAnnotator, is_storage_uri

logger = structlog.get_logger(__name__)

# Actions whose input must already live in Cloud Storage
STORAGE_ONLY_ACTIONS = {"shots", "explicit_content", "transcribe"}

ACTIONS = ("labels", "shots", "explicit_content", "transcribe")


def validate_uri(action: str, uri: str) -> Optional[str]:
    """
    Check that ``uri`` is acceptable input for ``action``.

    Args:
        action: The annotation action
        uri: Cloud Storage URI or local path

    Returns:
        An error message, or None when the input is acceptable
    """
    if not uri:
        return "A video URI is required"
    if is_storage_uri(uri):
        return None
    if action in STORAGE_ONLY_ACTIONS:
        return f"'{uri}' is not a Cloud Storage URI (expected gs://bucket/object)"
    if not os.path.isfile(uri):
        return f"Video file not found: {uri}"
    return None


class AnnotateCommand(BaseCommand):
    """Command class for video annotation.

    Provides a standardized interface for running one annotation feature
    against one video.
    """

    def __init__(self, annotator: Optional[VideoAnnotator] = None, timeout: Optional[float] = None):
        self.annotator = annotator or VideoAnnotator(timeout=timeout)

    def execute(self, action: str, uri: str = "", **kwargs) -> Dict[str, Any]:
        """Execute annotation command with provided arguments.

        Args:
            action: The annotation to run (labels, shots, explicit_content, transcribe)
            uri: Cloud Storage URI or, for labels, a local file path
            **kwargs: Feature options (mode, language_code, ...)

        Returns:
            Dict with command results
        """
        if action not in ACTIONS:
            return {
                "success": False,
                "error": f"Unknown annotate action: {action}"
            }

        error = validate_uri(action, uri)
        if error:
            return {
                "success": False,
                "error": error
            }

        try:
            if action == "labels":
                raw_results = self.annotator.analyze_labels(uri, mode=kwargs.get("mode"))
            elif action == "shots":
                raw_results = self.annotator.analyze_shots(uri)
            elif action == "explicit_content":
                raw_results = self.annotator.analyze_explicit_content(uri)
            else:
                transcribe_options = {
                    key: kwargs[key]
                    for key in ("language_code", "enable_automatic_punctuation", "max_alternatives")
                    if kwargs.get(key) is not None
                }
                raw_results = self.annotator.transcribe(uri, **transcribe_options)

            results = [AnnotationResult.from_proto(r) for r in raw_results]

        except Exception as e:
            logger.error("Annotate command failed", action=action, uri=uri, error=str(e))
            return {
                "success": False,
                "error": f"Annotation failed: {str(e)}"
            }

        errors = []
        for result in results:
            if result.error_message:
                logger.warning("Service reported an error for video", input_uri=result.input_uri, error=result.error_message)
                errors.append(f"{result.input_uri or uri}: {result.error_message}")

        if results and len(errors) == len(results):
            return {
                "success": False,
                "error": f"Annotation failed for {uri}: " + "; ".join(r.error_message for r in results)
            }

        return {
            "success": True,
            "data": {
                "action": action,
                "uri": uri,
                "results": results,
                "errors": errors,
            }
        }
