"""
User feedback and its processing history.
"""

from typing import List, Optional

from .base import AuditedEntity, Id, Model, lenient
from .common import Attachment, Info
from .enums import FeedbackAction, FeedbackState


class FeedbackTrack(Model):
    """One step in the processing of a feedback."""

    id: Optional[Id] = None
    feedback_id: Optional[Id] = None
    action: Optional[lenient(FeedbackAction)] = None
    operator: Optional[Info] = None
    content: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    create_time: Optional[str] = None


class Feedback(AuditedEntity):
    app: Optional[Info] = None
    submitter: Optional[Info] = None
    type: Optional[str] = None
    category: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    contact: Optional[str] = None
    status: Optional[lenient(FeedbackState)] = None
    tracks: Optional[List[FeedbackTrack]] = None
