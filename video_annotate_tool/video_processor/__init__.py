"""
Video processing package for sending videos to the annotation service.

Re-exports all video processor components.
"""

from .analysis import VideoAnnotator, LabelMode, is_storage_uri

__all__ = [
    'VideoAnnotator',
    'LabelMode',
    'is_storage_uri',
]
