"""
Slides API Operations

Builders for individual Google Slides ``batchUpdate`` request objects, and
the chunking of a flat request list into size-bounded batches.

Positions and sizes in slide documents are in points; the API takes EMUs
(English Metric Units). 1 pt = 12700 EMUs, 1 inch = 914400 EMUs.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .colors import RgbColor

EMU_PER_PT = 12700

BATCH_SIZE = 50
DEFAULT_FONT = "Arial"
LINE_SPACING = 115

Request = Dict[str, Any]


def pt_to_emu(points: float) -> float:
    """Convert points to EMUs."""
    return points * EMU_PER_PT


@dataclass
class BoxPosition:
    """Position and size in EMUs."""
    x: float
    y: float
    cx: float
    cy: float

    @classmethod
    def from_points(cls, x: float, y: float, w: float, h: float) -> "BoxPosition":
        """Create from point measurements."""
        return cls(x=pt_to_emu(x), y=pt_to_emu(y), cx=pt_to_emu(w), cy=pt_to_emu(h))


# ============================================================
# PAGE OPERATIONS
# ============================================================

def create_slide_request(
    slide_id: str,
    layout: str = "BLANK",
    insertion_index: Optional[int] = None,
) -> Request:
    body: Dict[str, Any] = {
        "objectId": slide_id,
        "slideLayoutReference": {"predefinedLayout": layout},
    }
    if insertion_index is not None:
        body["insertionIndex"] = insertion_index
    return {"createSlide": body}


def background_request(slide_id: str, color: RgbColor) -> Request:
    """Solid page background fill."""
    return {
        "updatePageProperties": {
            "objectId": slide_id,
            "pageProperties": {
                "pageBackgroundFill": {
                    "solidFill": {"color": {"rgbColor": color.to_api()}},
                },
            },
            "fields": "pageBackgroundFill",
        }
    }


def delete_object_request(object_id: str) -> Request:
    return {"deleteObject": {"objectId": object_id}}


def insert_text_request(
    object_id: str,
    text: str,
    insertion_index: Optional[int] = 0,
) -> Request:
    body: Dict[str, Any] = {"objectId": object_id, "text": text}
    if insertion_index is not None:
        body["insertionIndex"] = insertion_index
    return {"insertText": body}


# ============================================================
# TEXT BOXES
# ============================================================

def text_box_requests(
    slide_id: str,
    element_id: str,
    position: BoxPosition,
    text: str,
    font_size: float,
    color: RgbColor,
    bold: bool = False,
    font_family: str = DEFAULT_FONT,
) -> List[Request]:
    """Requests that create and style one text box.

    The four requests must stay contiguous and in order: the last three
    reference the shape created by the first.
    """
    return [
        {
            "createShape": {
                "objectId": element_id,
                "shapeType": "TEXT_BOX",
                "elementProperties": {
                    "pageObjectId": slide_id,
                    "size": {
                        "width": {"magnitude": position.cx, "unit": "EMU"},
                        "height": {"magnitude": position.cy, "unit": "EMU"},
                    },
                    "transform": {
                        "scaleX": 1,
                        "scaleY": 1,
                        "translateX": position.x,
                        "translateY": position.y,
                        "unit": "EMU",
                    },
                },
            }
        },
        insert_text_request(element_id, text, insertion_index=None),
        {
            "updateTextStyle": {
                "objectId": element_id,
                "style": {
                    "fontFamily": font_family,
                    "fontSize": {"magnitude": font_size, "unit": "PT"},
                    "foregroundColor": {"opaqueColor": {"rgbColor": color.to_api()}},
                    "bold": bold,
                },
                "fields": "fontFamily,fontSize,foregroundColor,bold",
            }
        },
        {
            "updateParagraphStyle": {
                "objectId": element_id,
                "style": {
                    "lineSpacing": LINE_SPACING,
                    "alignment": "START",
                },
                "fields": "lineSpacing,alignment",
            }
        },
    ]


# ============================================================
# BATCHING
# ============================================================

def chunk_requests(
    requests: Sequence[Request],
    size: int = BATCH_SIZE,
) -> List[List[Request]]:
    """Split requests into consecutive batches of at most ``size``, keeping order."""
    if size < 1:
        raise ValueError("Batch size must be at least 1")
    return [list(requests[i:i + size]) for i in range(0, len(requests), size)]
