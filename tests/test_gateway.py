"""Tests for the Google Slides gateway, response helpers, and auth paths."""

from unittest import mock

import pytest

from deck_compiler import auth
from deck_compiler.errors import AuthError
from deck_compiler.gateway import (
    GoogleSlidesGateway,
    placeholder_object_id,
    presentation_url,
    slide_object_ids,
    speaker_notes_object_id,
)


# ============================================================
# GATEWAY
# ============================================================

def test_gateway_calls_slides_service():
    service = mock.MagicMock()
    presentations = service.presentations.return_value
    presentations.create.return_value.execute.return_value = {"presentationId": "new"}
    presentations.get.return_value.execute.return_value = {"slides": []}
    presentations.batchUpdate.return_value.execute.return_value = {"replies": []}

    gateway = GoogleSlidesGateway(service)

    assert gateway.create_presentation("Title") == {"presentationId": "new"}
    presentations.create.assert_called_once_with(body={"title": "Title"})

    assert gateway.get_presentation("abc") == {"slides": []}
    presentations.get.assert_called_once_with(presentationId="abc")

    reqs = [{"deleteObject": {"objectId": "x"}}]
    gateway.batch_update("abc", reqs)
    presentations.batchUpdate.assert_called_once_with(presentationId="abc", body={"requests": reqs})


def test_gateway_errors_propagate():
    service = mock.MagicMock()
    service.presentations.return_value.get.return_value.execute.side_effect = RuntimeError("404")
    with pytest.raises(RuntimeError, match="404"):
        GoogleSlidesGateway(service).get_presentation("missing")


def test_from_credentials_builds_slides_v1():
    with mock.patch("deck_compiler.gateway.build") as build:
        gateway = GoogleSlidesGateway.from_credentials("creds")
    build.assert_called_once_with("slides", "v1", credentials="creds", cache_discovery=False)
    assert gateway.service is build.return_value


# ============================================================
# RESPONSE HELPERS
# ============================================================

def test_presentation_url():
    assert presentation_url("abc") == "https://docs.google.com/presentation/d/abc/edit"


def test_slide_object_ids():
    assert slide_object_ids({"slides": [{"objectId": "a"}, {"objectId": "b"}]}) == ["a", "b"]
    assert slide_object_ids({}) == []


def test_speaker_notes_object_id():
    slide = {"slideProperties": {"notesPage": {"notesProperties": {"speakerNotesObjectId": "n1"}}}}
    assert speaker_notes_object_id(slide) == "n1"
    assert speaker_notes_object_id({"objectId": "s"}) is None


def test_placeholder_object_id():
    slide = {"pageElements": [
        {"objectId": "img"},
        {"objectId": "t", "shape": {"placeholder": {"type": "TITLE"}}},
        {"objectId": "b", "shape": {"placeholder": {"type": "BODY"}}},
    ]}
    assert placeholder_object_id(slide, "TITLE") == "t"
    assert placeholder_object_id(slide, "BODY") == "b"
    assert placeholder_object_id(slide, "SUBTITLE") is None


# ============================================================
# AUTH
# ============================================================

def test_config_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv(auth.HOME_ENV_VAR, str(tmp_path))
    assert auth.token_path() == tmp_path / "token.json"
    assert auth.client_secrets_path() == tmp_path / "credentials.json"


def test_get_credentials_without_token(monkeypatch, tmp_path):
    monkeypatch.setenv(auth.HOME_ENV_VAR, str(tmp_path))
    with pytest.raises(AuthError, match="--auth"):
        auth.get_credentials()


def test_run_auth_flow_without_client_secrets(monkeypatch, tmp_path):
    monkeypatch.setenv(auth.HOME_ENV_VAR, str(tmp_path))
    with pytest.raises(AuthError, match="client secrets not found"):
        auth.run_auth_flow()


def test_get_credentials_refreshes_expired_token(monkeypatch, tmp_path):
    monkeypatch.setenv(auth.HOME_ENV_VAR, str(tmp_path))
    (tmp_path / "token.json").write_text("{}", encoding="utf-8")

    creds = mock.MagicMock(valid=False, expired=True, refresh_token="r")
    creds.to_json.return_value = '{"token": "new"}'
    with mock.patch.object(auth.Credentials, "from_authorized_user_file", return_value=creds):
        assert auth.get_credentials() is creds

    creds.refresh.assert_called_once()
    assert (tmp_path / "token.json").read_text(encoding="utf-8") == '{"token": "new"}'
