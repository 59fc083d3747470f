"""
Presentation Gateway

The three Slides API calls the compilers need: create, get and batchUpdate.
Responses are Slides API resources as plain dicts. API failures surface as
``googleapiclient.errors.HttpError`` and are not retried.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from googleapiclient.discovery import build

logger = logging.getLogger(__name__)

PRESENTATION_URL = "https://docs.google.com/presentation/d/{presentation_id}/edit"


class PresentationGateway(Protocol):
    def create_presentation(self, title: str) -> Dict[str, Any]:
        ...

    def get_presentation(self, presentation_id: str) -> Dict[str, Any]:
        ...

    def batch_update(self, presentation_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        ...


def presentation_url(presentation_id: str) -> str:
    return PRESENTATION_URL.format(presentation_id=presentation_id)


class GoogleSlidesGateway:
    """PresentationGateway backed by the Google Slides v1 API."""

    def __init__(self, service: Any):
        self.service = service

    @classmethod
    def from_credentials(cls, credentials: Any) -> "GoogleSlidesGateway":
        service = build("slides", "v1", credentials=credentials, cache_discovery=False)
        return cls(service)

    def create_presentation(self, title: str) -> Dict[str, Any]:
        logger.info("Creating presentation %r", title)
        return self.service.presentations().create(body={"title": title}).execute()

    def get_presentation(self, presentation_id: str) -> Dict[str, Any]:
        logger.debug("Fetching presentation %s", presentation_id)
        return self.service.presentations().get(presentationId=presentation_id).execute()

    def batch_update(self, presentation_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        logger.debug("Applying %d requests to %s", len(requests), presentation_id)
        return self.service.presentations().batchUpdate(
            presentationId=presentation_id,
            body={"requests": requests},
        ).execute()


# ============================================================
# RESPONSE HELPERS
# ============================================================

def slide_object_ids(presentation: Dict[str, Any]) -> List[str]:
    """Object ids of the presentation's slides, in order."""
    return [slide["objectId"] for slide in presentation.get("slides") or [] if slide.get("objectId")]


def speaker_notes_object_id(slide: Dict[str, Any]) -> Optional[str]:
    """Id of the shape holding a slide's speaker notes, if the API reported one."""
    notes_page = (slide.get("slideProperties") or {}).get("notesPage") or {}
    return (notes_page.get("notesProperties") or {}).get("speakerNotesObjectId")


def placeholder_object_id(slide: Dict[str, Any], placeholder_type: str) -> Optional[str]:
    """Id of the first placeholder shape of the given type (TITLE, BODY, ...)."""
    for element in slide.get("pageElements") or []:
        placeholder = (element.get("shape") or {}).get("placeholder")
        if placeholder and placeholder.get("type") == placeholder_type:
            return element.get("objectId")
    return None
