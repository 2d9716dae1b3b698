#!/usr/bin/env python3
"""
Tests for decoding stored documents into typed records.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from higure.models import FileRecord, InvisibleAliasRecord, ShortLinkRecord, is_invisible_key  # noqa: E402
from higure.services.exceptions import DecodeError, NotFoundError  # noqa: E402

from fakes import file_doc  # noqa: E402


class TestFileRecord:

    def test_decodes_full_document(self):
        record = FileRecord.from_document(file_doc(userOnlyDomain=True, showLink=True))
        assert record.filename == 'pic.png'
        assert record.key == 'files/pic.png'
        assert record.uploader.username == 'alice'
        assert record.embed.color == '#ff00aa'
        assert record.user_only_domain is True
        assert record.show_link is True

    def test_category_is_text_before_first_slash(self):
        record = FileRecord.from_document(file_doc(mimetype='video/mp4'))
        assert record.category == 'video'
        assert record.is_video and not record.is_image

    def test_optional_flags_default_to_false(self):
        doc = file_doc()
        del doc['userOnlyDomain']
        del doc['showLink']
        record = FileRecord.from_document(doc)
        assert record.user_only_domain is False
        assert record.show_link is False

    def test_missing_embed_is_a_decode_error(self):
        doc = file_doc()
        del doc['embed']
        with pytest.raises(DecodeError) as exc_info:
            FileRecord.from_document(doc)
        assert exc_info.value.message == 'invalid file'
        assert 'embed' in exc_info.value.reason

    def test_wrong_type_is_a_decode_error(self):
        with pytest.raises(DecodeError) as exc_info:
            FileRecord.from_document(file_doc(embed={'title': 42}))
        assert 'title' in exc_info.value.reason

    def test_decode_error_is_reported_like_not_found(self):
        assert issubclass(DecodeError, NotFoundError)


class TestOtherRecords:

    def test_short_link(self):
        link = ShortLinkRecord.from_document({'shortId': 'abc', 'destination': 'example.com/x'})
        assert link.short_id == 'abc'
        assert link.destination == 'example.com/x'

    def test_short_link_without_destination(self):
        with pytest.raises(DecodeError) as exc_info:
            ShortLinkRecord.from_document({'shortId': 'abc'})
        assert exc_info.value.message == 'invalid short link'

    def test_invisible_alias(self):
        alias = InvisibleAliasRecord.from_document({'_id': 'abc\u200b', 'filename': 'pic.png'})
        assert alias.alias_id == 'abc\u200b'
        assert alias.filename == 'pic.png'

    def test_invisible_key_detection(self):
        assert is_invisible_key('abc\u200b')
        assert not is_invisible_key('abc')
        assert not is_invisible_key('')
