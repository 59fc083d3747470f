"""Shared fixtures: an in-memory stand-in for the Google Slides API."""

import copy

import pytest


class FakeSlidesGateway:
    """Records gateway calls and keeps a minimal slide list in memory.

    createSlide and deleteObject requests update the slide list; every created
    slide gets a speaker notes shape, and TITLE_AND_BODY slides get TITLE and
    BODY placeholders.
    """

    def __init__(self, presentation_id="deck123", existing_slides=None, with_notes=True):
        self.presentation_id = presentation_id
        self.with_notes = with_notes
        self.slides = [self._make_slide(sid, "BLANK") for sid in (existing_slides or [])]
        self.calls = []
        self.fail_on_batch = None

    def _make_slide(self, object_id, layout):
        slide = {"objectId": object_id, "pageElements": []}
        if self.with_notes:
            slide["slideProperties"] = {
                "notesPage": {"notesProperties": {"speakerNotesObjectId": f"{object_id}_notes"}}
            }
        if layout == "TITLE_AND_BODY":
            slide["pageElements"] = [
                {"objectId": f"{object_id}_title", "shape": {"placeholder": {"type": "TITLE"}}},
                {"objectId": f"{object_id}_body", "shape": {"placeholder": {"type": "BODY", "index": 0}}},
            ]
        return slide

    @property
    def batches(self):
        return [c[2] for c in self.calls if c[0] == "batch_update"]

    def create_presentation(self, title):
        self.calls.append(("create", title))
        self.slides = [self._make_slide("p", "TITLE")]
        return {"presentationId": self.presentation_id, "title": title, "slides": copy.deepcopy(self.slides)}

    def get_presentation(self, presentation_id):
        self.calls.append(("get", presentation_id))
        return {"presentationId": presentation_id, "slides": copy.deepcopy(self.slides)}

    def batch_update(self, presentation_id, requests):
        self.calls.append(("batch_update", presentation_id, list(requests)))
        if self.fail_on_batch is not None and len(self.batches) == self.fail_on_batch:
            raise RuntimeError("quota exceeded")
        for request in requests:
            if "createSlide" in request:
                body = request["createSlide"]
                slide = self._make_slide(body["objectId"], body["slideLayoutReference"]["predefinedLayout"])
                self.slides.insert(body.get("insertionIndex", len(self.slides)), slide)
            elif "deleteObject" in request:
                object_id = request["deleteObject"]["objectId"]
                self.slides = [s for s in self.slides if s["objectId"] != object_id]
        return {"presentationId": presentation_id, "replies": [{} for _ in requests]}


@pytest.fixture
def gateway():
    return FakeSlidesGateway()
