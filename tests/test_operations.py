"""Tests for Slides API request builders and batching."""

import pytest

from deck_compiler.colors import RgbColor
from deck_compiler.operations import (
    BATCH_SIZE,
    EMU_PER_PT,
    BoxPosition,
    background_request,
    chunk_requests,
    create_slide_request,
    delete_object_request,
    insert_text_request,
    pt_to_emu,
    text_box_requests,
)


# ============================================================
# UNITS
# ============================================================

def test_pt_to_emu():
    assert EMU_PER_PT == 12700
    assert pt_to_emu(1) == 12700
    assert pt_to_emu(0) == 0
    assert pt_to_emu(0.5) == 6350


def test_box_position_from_points():
    pos = BoxPosition.from_points(10, 20, 100, 50)
    assert pos.x == 10 * 12700
    assert pos.y == 20 * 12700
    assert pos.cx == 100 * 12700
    assert pos.cy == 50 * 12700


# ============================================================
# REQUEST BUILDERS
# ============================================================

def test_create_slide_request():
    req = create_slide_request("s1", insertion_index=2)
    assert req == {
        "createSlide": {
            "objectId": "s1",
            "slideLayoutReference": {"predefinedLayout": "BLANK"},
            "insertionIndex": 2,
        }
    }


def test_create_slide_request_without_index():
    req = create_slide_request("s1", "TITLE_AND_BODY")
    assert "insertionIndex" not in req["createSlide"]
    assert req["createSlide"]["slideLayoutReference"]["predefinedLayout"] == "TITLE_AND_BODY"


def test_background_request():
    req = background_request("s1", RgbColor(red=1, green=0, blue=0))
    props = req["updatePageProperties"]
    assert props["objectId"] == "s1"
    assert props["fields"] == "pageBackgroundFill"
    fill = props["pageProperties"]["pageBackgroundFill"]["solidFill"]["color"]["rgbColor"]
    assert fill == {"red": 1, "green": 0, "blue": 0}


def test_delete_and_insert_text():
    assert delete_object_request("x") == {"deleteObject": {"objectId": "x"}}
    assert insert_text_request("n", "hi") == {
        "insertText": {"objectId": "n", "text": "hi", "insertionIndex": 0}
    }
    assert insert_text_request("n", "hi", insertion_index=None) == {
        "insertText": {"objectId": "n", "text": "hi"}
    }


def test_text_box_requests_order_and_content():
    reqs = text_box_requests(
        "s1", "s1_text_0",
        BoxPosition.from_points(10, 20, 100, 50),
        "Hello", 18, RgbColor(red=0, green=0, blue=1),
    )
    assert [next(iter(r)) for r in reqs] == [
        "createShape", "insertText", "updateTextStyle", "updateParagraphStyle",
    ]
    assert all(next(iter(r.values()))["objectId"] == "s1_text_0" for r in reqs)

    shape = reqs[0]["createShape"]
    assert shape["shapeType"] == "TEXT_BOX"
    assert shape["elementProperties"]["pageObjectId"] == "s1"
    assert shape["elementProperties"]["size"]["width"] == {"magnitude": 1270000, "unit": "EMU"}
    assert shape["elementProperties"]["size"]["height"] == {"magnitude": 635000, "unit": "EMU"}
    assert shape["elementProperties"]["transform"]["translateX"] == 127000
    assert shape["elementProperties"]["transform"]["translateY"] == 254000

    style = reqs[2]["updateTextStyle"]["style"]
    assert style["fontFamily"] == "Arial"
    assert style["fontSize"] == {"magnitude": 18, "unit": "PT"}
    assert style["bold"] is False
    assert style["foregroundColor"]["opaqueColor"]["rgbColor"] == {"red": 0, "green": 0, "blue": 1}

    para = reqs[3]["updateParagraphStyle"]
    assert para["style"] == {"lineSpacing": 115, "alignment": "START"}


def test_text_box_custom_font_and_bold():
    reqs = text_box_requests(
        "s1", "e1", BoxPosition.from_points(0, 0, 1, 1), "x", 10,
        RgbColor(), bold=True, font_family="Roboto",
    )
    style = reqs[2]["updateTextStyle"]["style"]
    assert style["fontFamily"] == "Roboto"
    assert style["bold"] is True


# ============================================================
# BATCHING
# ============================================================

def test_chunk_requests_120_into_three():
    requests = [{"n": i} for i in range(120)]
    batches = chunk_requests(requests)
    assert BATCH_SIZE == 50
    assert [len(b) for b in batches] == [50, 50, 20]
    assert [r["n"] for b in batches for r in b] == list(range(120))


def test_chunk_requests_exact_multiple():
    assert [len(b) for b in chunk_requests([{}] * 100)] == [50, 50]


def test_chunk_requests_empty():
    assert chunk_requests([]) == []


def test_chunk_requests_invalid_size():
    with pytest.raises(ValueError):
        chunk_requests([{}], size=0)
