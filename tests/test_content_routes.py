#!/usr/bin/env python3
"""
HTTP-level tests for the content blueprint.

Uses in-memory stores injected through ContentServices, so no MongoDB or S3 is
needed.
"""

import json
import os
import sys
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from higure.app import create_app  # noqa: E402

from fakes import ZWSP, FakeDocumentStore, FakeObjectBackend, file_doc, make_services  # noqa: E402

PNG_BYTES = b'\x89PNG\r\n\x1a\nfake'
MP4_BYTES = b'\x00\x00\x00\x18ftypmp42'


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def backend():
    return FakeObjectBackend()


@pytest.fixture
def client(store, backend):
    app = create_app(make_services(store, backend), config={'ENABLE_COMPRESSION': False})
    return app.test_client()


def _add_file(store, backend, body=PNG_BYTES, content_type='image/png', **kwargs):
    doc = file_doc(**kwargs)
    store.insert('files', doc)
    backend.put(doc['key'], body, content_type)
    return doc


def _get(client, path, host='i.higure.wtf'):
    return client.get(path, headers={'Host': host})


class TestRootAndNoop:

    def test_root_redirects_to_canonical_site(self, client):
        response = _get(client, '/')
        assert response.status_code == 301
        assert response.headers['Location'] == 'https://higure.wtf'
        assert response.data == b''

    def test_favicon_is_ignored(self, client, store):
        response = _get(client, '/favicon.ico')
        assert response.status_code == 204
        assert store.queries == []


class TestOEmbed:

    def test_returns_exact_envelope(self, client, store, backend):
        _add_file(store, backend)
        response = _get(client, '/pic.png.json', host='b.com')
        assert response.status_code == 200
        assert response.mimetype == 'application/json'
        assert response.get_json() == {
            'version': '1.0',
            'type': 'link',
            'title': 'Hosted on b.com',
            'author_name': 'alice @ b.com',
        }

    def test_does_not_fetch_object(self, client, store, backend):
        _add_file(store, backend)
        _get(client, '/pic.png.json')
        assert backend.requested == []

    def test_unknown_file(self, client):
        response = _get(client, '/missing.png.json')
        assert response.get_json() == {'success': False, 'error': 'invalid file'}


class TestShortLinks:

    def test_scheme_is_added(self, client, store):
        store.insert('shorteners', {'shortId': 'abc', 'destination': 'example.com/x'})
        response = _get(client, '/s/abc')
        assert response.status_code == 301
        assert response.headers['Location'] == 'https://example.com/x'

    def test_existing_scheme_is_kept(self, client, store):
        store.insert('shorteners', {'shortId': 'abc', 'destination': 'http://example.com/x'})
        response = _get(client, '/s/abc')
        assert response.headers['Location'] == 'http://example.com/x'

    def test_unknown_short_link(self, client):
        response = _get(client, '/s/nope')
        assert response.mimetype == 'application/json'
        assert response.get_json() == {'success': False, 'error': 'invalid short link'}


class TestRawDelivery:

    def test_plain_file_returns_upstream_bytes_and_type(self, client, store, backend):
        _add_file(store, backend)
        response = _get(client, '/pic.png')
        assert response.status_code == 200
        assert response.data == PNG_BYTES
        assert response.headers['Content-Type'] == 'image/png'

    def test_upstream_content_type_is_forwarded_verbatim(self, client, store, backend):
        _add_file(store, backend, body=b'%PDF-1.7', content_type='application/pdf; charset=binary',
                  filename='doc.pdf', mimetype='application/pdf')
        response = _get(client, '/doc.pdf')
        assert response.data == b'%PDF-1.7'
        assert response.headers['Content-Type'] == 'application/pdf; charset=binary'

    def test_missing_upstream_content_type(self, client, store, backend):
        _add_file(store, backend, content_type=None)
        response = _get(client, '/pic.png')
        assert response.headers['Content-Type'] == 'application/octet-stream'

    def test_object_fetched_by_record_key(self, client, store, backend):
        _add_file(store, backend, key='2024/abc123')
        _get(client, '/pic.png')
        assert backend.requested == ['2024/abc123']

    def test_upstream_failure_reports_underlying_error(self, client, store):
        store.insert('files', file_doc())
        response = _get(client, '/pic.png')
        body = response.get_json()
        assert body['success'] is False
        assert 'NoSuchKey' in body['error']


class TestShowLink:

    def test_image_gets_show_link_page(self, client, store, backend):
        _add_file(store, backend, showLink=True)
        response = _get(client, '/pic.png')
        html = response.get_data(as_text=True)
        assert response.mimetype == 'text/html'
        assert '<meta property="og:image" content="http://s3.test/uploads/files/pic.png" />' in html
        assert '<img width="500px"' in html
        assert 'application/json+oembed' not in html

    def test_video_bypasses_show_link_page(self, client, store, backend):
        _add_file(store, backend, body=MP4_BYTES, content_type='video/mp4',
                  filename='clip.mp4', mimetype='video/mp4', showLink=True)
        response = _get(client, '/clip.mp4')
        assert response.data == MP4_BYTES
        assert response.headers['Content-Type'] == 'video/mp4'


class TestEmbedPage:

    def _page(self, client, store, backend, path='/pic.png', host='b.com', **kwargs):
        kwargs.setdefault('embed', {})
        kwargs['embed'] = dict(kwargs['embed'], enabled=True)
        _add_file(store, backend, **kwargs)
        response = _get(client, path, host=host)
        assert response.mimetype == 'text/html'
        return response.get_data(as_text=True)

    def test_image_body_and_meta(self, client, store, backend):
        html = self._page(client, store, backend)
        assert 'content="summary_large_image"' in html
        assert '<meta property="og:image" content="http://s3.test/uploads/files/pic.png" />' in html
        assert '<img style=' in html
        assert '<video' not in html
        assert 'Download</button>' not in html

    def test_video_body_and_meta(self, client, store, backend):
        html = self._page(client, store, backend, path='/clip.mp4', filename='clip.mp4',
                          mimetype='video/mp4', body=MP4_BYTES, content_type='video/mp4')
        assert 'content="player"' in html
        assert '<video' in html and 'controls autoplay' in html
        assert '<img style=' not in html
        assert 'Download</button>' not in html

    def test_other_files_get_download_button(self, client, store, backend):
        html = self._page(client, store, backend, path='/notes.txt', filename='notes.txt',
                          mimetype='text/plain', body=b'hi', content_type='text/plain')
        assert 'notes.txt' in html
        assert '1.2 MB' in html
        assert 'Download</button>' in html
        assert 'http://s3.test/uploads/files/notes.txt' in html
        assert '<img style=' not in html
        assert '<video' not in html

    def test_description_color_and_oembed_link(self, client, store, backend):
        html = self._page(client, store, backend, host='b.com')
        assert 'content="Uploaded to b.com via b.com"' in html
        assert '<meta name="theme-color" content="#ff00aa" />' in html
        assert '<link type="application/json+oembed" href="https://b.com/pic.png.json" />' in html
        assert 'Uploaded by: <span class="info">alice</span>' in html
        assert '<title>alice on higure.wtf</title>' in html

    def test_embed_takes_priority_over_show_link(self, client, store, backend):
        html = self._page(client, store, backend, showLink=True)
        assert 'application/json+oembed' in html

    def test_embed_values_are_escaped(self, client, store, backend):
        html = self._page(client, store, backend, embed={'description': '"><script>x</script>'})
        assert '<script>x</script>' not in html

    def test_render_failure_is_reported(self, client, store, backend):
        from jinja2 import TemplateError

        with patch('higure.services.composer.render_template', side_effect=TemplateError('boom')):
            _add_file(store, backend, embed={'enabled': True})
            response = _get(client, '/pic.png')
        assert response.get_json() == {'success': False, 'error': 'boom'}


class TestInvisibleAliases:

    def test_alias_matches_direct_response(self, client, store, backend):
        _add_file(store, backend, embed={'enabled': True})
        store.insert('invisibleurls', {'_id': 'abc' + ZWSP, 'filename': 'pic.png'})

        direct = _get(client, '/pic.png')
        via_alias = _get(client, '/abc%E2%80%8B')

        assert via_alias.status_code == direct.status_code
        assert via_alias.get_data() == direct.get_data()
        assert 'href="https://i.higure.wtf/pic.png.json"' in via_alias.get_data(as_text=True)

    def test_unknown_alias(self, client):
        response = _get(client, '/abc%E2%80%8B')
        assert response.get_json() == {'success': False, 'error': 'no invisible url or file was found'}


class TestDomainPolicy:

    def test_restricted_file_via_alias_looks_missing_on_other_host(self, client, store, backend):
        _add_file(store, backend, userOnlyDomain=True, domain='a.com')
        store.insert('invisibleurls', {'_id': 'abc' + ZWSP, 'filename': 'pic.png'})

        response = _get(client, '/abc%E2%80%8B', host='b.com')

        assert response.get_json() == {'success': False, 'error': 'invalid file'}
        assert backend.requested == []

    def test_restricted_file_via_alias_served_on_own_host(self, client, store, backend):
        _add_file(store, backend, userOnlyDomain=True, domain='a.com')
        store.insert('invisibleurls', {'_id': 'abc' + ZWSP, 'filename': 'pic.png'})

        response = _get(client, '/abc%E2%80%8B', host='a.com')

        assert response.data == PNG_BYTES

    def test_restricted_file_looks_missing_on_other_host(self, client, store, backend):
        _add_file(store, backend, userOnlyDomain=True, domain='a.com')
        restricted = _get(client, '/pic.png', host='b.com')
        missing = _get(client, '/nothing.png', host='b.com')
        assert restricted.status_code == missing.status_code
        assert restricted.get_data() == missing.get_data()
        assert backend.requested == []

    def test_restricted_file_served_on_own_host(self, client, store, backend):
        _add_file(store, backend, userOnlyDomain=True, domain='a.com')
        response = _get(client, '/pic.png', host='a.com')
        assert response.data == PNG_BYTES


class TestErrorEnvelope:

    def test_errors_use_200_by_default(self, client):
        response = _get(client, '/missing.png')
        assert response.status_code == 200
        assert response.mimetype == 'application/json'
        assert json.loads(response.data) == {'success': False, 'error': 'invalid file'}

    def test_status_codes_can_be_enabled(self, store, backend):
        app = create_app(make_services(store, backend),
                         config={'ERROR_STATUS_CODES': True, 'ENABLE_COMPRESSION': False})
        client = app.test_client()
        assert _get(client, '/missing.png').status_code == 404
        store.insert('files', file_doc())
        assert _get(client, '/pic.png').status_code == 502

    def test_undecodable_record_reported_as_missing(self, client, store):
        doc = file_doc()
        del doc['embed']
        store.insert('files', doc)
        response = _get(client, '/pic.png')
        assert response.get_json() == {'success': False, 'error': 'invalid file'}

    def test_unexpected_errors_are_enveloped(self, client, store):
        with patch.object(FakeDocumentStore, 'find_one', side_effect=RuntimeError('db down')):
            response = _get(client, '/pic.png')
        assert response.get_json() == {'success': False, 'error': 'internal server error'}
