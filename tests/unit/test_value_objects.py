"""Unit tests for the Image and Media value objects."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.value_objects import Image, Media, MediaStatus


class TestImage:
    """Tests for Image value object."""

    def test_create(self):
        assert Image(path="vid-1-thumb.png").path == "vid-1-thumb.png"

    def test_empty_path_rejected(self):
        with pytest.raises(PydanticValidationError):
            Image(path="")

    def test_frozen(self):
        image = Image(path="a.png")
        with pytest.raises(PydanticValidationError):
            image.path = "b.png"  # type: ignore[misc]

    def test_equality_by_value(self):
        assert Image(path="a.png") == Image(path="a.png")


class TestMedia:
    """Tests for Media value object and its state machine."""

    def test_defaults(self):
        media = Media(file_path="vid-1-media.mp4")
        assert media.status == MediaStatus.PENDING
        assert media.encoded_path is None
        assert media.is_encoded is False

    def test_frozen(self):
        media = Media(file_path="vid-1-media.mp4")
        with pytest.raises(PydanticValidationError):
            media.status = MediaStatus.ERROR  # type: ignore[misc]

    def test_pending_to_processing(self):
        media = Media(file_path="m.mp4").sent_to_encode()
        assert media.status == MediaStatus.PROCESSING

    def test_processing_to_completed(self):
        media = Media(file_path="m.mp4").sent_to_encode().encoded("enc/m.mp4")

        assert media.status == MediaStatus.COMPLETED
        assert media.encoded_path == "enc/m.mp4"
        assert media.file_path == "m.mp4"
        assert media.is_encoded is True

    def test_pending_to_completed(self):
        media = Media(file_path="m.mp4").encoded("enc/m.mp4")
        assert media.status == MediaStatus.COMPLETED

    def test_processing_to_error(self):
        media = Media(file_path="m.mp4").sent_to_encode().encoding_failed()
        assert media.status == MediaStatus.ERROR

    def test_error_can_be_resent(self):
        media = Media(file_path="m.mp4").sent_to_encode().encoding_failed()
        assert media.sent_to_encode().status == MediaStatus.PROCESSING

    def test_completed_never_reverts(self):
        media = Media(file_path="m.mp4").encoded("enc/m.mp4")
        assert media.is_encoded

        with pytest.raises(EntityValidationException):
            media.sent_to_encode()
        with pytest.raises(EntityValidationException):
            media.encoding_failed()
        with pytest.raises(EntityValidationException):
            media.encoded("enc/other.mp4")

    def test_pending_cannot_fail(self):
        with pytest.raises(EntityValidationException):
            Media(file_path="m.mp4").encoding_failed()

    def test_error_cannot_be_encoded_directly(self):
        media = Media(file_path="m.mp4").sent_to_encode().encoding_failed()
        with pytest.raises(EntityValidationException):
            media.encoded("enc/m.mp4")

    @pytest.mark.parametrize("path", ["", "  "])
    def test_encoded_requires_path(self, path):
        with pytest.raises(
            EntityValidationException, match="EncodedPath should not be empty or null."
        ):
            Media(file_path="m.mp4").sent_to_encode().encoded(path)

    def test_transitions_return_new_instances(self):
        original = Media(file_path="m.mp4")
        processing = original.sent_to_encode()

        assert processing is not original
        assert original.status == MediaStatus.PENDING
