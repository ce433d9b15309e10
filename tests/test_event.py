"""Tests for loading the release trigger payload."""

import json
import os
from unittest.mock import patch

import pytest

from release_upload.event import ReleaseEvent, load_release_event
from release_upload.exceptions import PreconditionError


RELEASE = {
    'upload_url': 'https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}',
    'tag_name': 'v1.2.3',
    'target_commitish': 'main',
    'name': 'Release 1.2.3',
}


@pytest.fixture
def event_file(tmp_path):
    def write(payload):
        path = tmp_path / 'event.json'
        path.write_text(json.dumps(payload))
        return path
    return write


def test_load_release_event(event_file):
    path = event_file({'action': 'published', 'release': RELEASE})

    event = load_release_event(path)

    assert event.upload_url == RELEASE['upload_url']
    assert event.tag_name == 'v1.2.3'
    assert event.target_commitish == 'main'
    assert event.name == 'Release 1.2.3'
    assert event.raw == RELEASE


def test_event_path_from_environment(event_file):
    path = event_file({'release': RELEASE})

    with patch.dict(os.environ, {'GITHUB_EVENT_PATH': str(path)}):
        event = load_release_event()

    assert event.tag_name == 'v1.2.3'


def test_event_path_from_explicit_environ(event_file):
    path = event_file({'release': RELEASE})
    event = load_release_event(environ={'GITHUB_EVENT_PATH': str(path)})
    assert event.tag_name == 'v1.2.3'


def test_unset_event_path_is_precondition_error():
    with pytest.raises(PreconditionError, match='GITHUB_EVENT_PATH'):
        load_release_event(environ={})


def test_missing_event_file(tmp_path):
    with pytest.raises(PreconditionError, match='not found'):
        load_release_event(tmp_path / 'missing.json')


def test_invalid_json(tmp_path):
    path = tmp_path / 'event.json'
    path.write_text('{not json')
    with pytest.raises(PreconditionError, match='not valid JSON'):
        load_release_event(path)


@pytest.mark.parametrize('payload', [
    {'ref': 'refs/heads/main', 'commits': []},
    {'release': None},
    {'release': 'v1.0'},
    [],
    None,
])
def test_not_a_release_event(event_file, payload):
    path = event_file(payload)
    with pytest.raises(PreconditionError, match='This is not a release event'):
        load_release_event(path)


def test_missing_release_fields(event_file):
    path = event_file({'release': {'tag_name': 'v1.0'}})
    with pytest.raises(PreconditionError) as exc_info:
        load_release_event(path)

    assert 'upload_url' in str(exc_info.value)
    assert 'target_commitish' in str(exc_info.value)
    assert exc_info.value.exit_code == 1


def test_null_release_name_becomes_empty():
    release = dict(RELEASE, name=None)
    event = ReleaseEvent.from_payload({'release': release})
    assert event.name == ''


def test_payload_not_utf8_is_precondition_error(tmp_path):
    path = tmp_path / 'event.json'
    path.write_bytes(b'\xff\xfe{}')

    with pytest.raises(PreconditionError) as exc_info:
        load_release_event(path)

    assert exc_info.value.exit_code == 1
