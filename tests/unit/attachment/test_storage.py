"""Tests for attachment file storage functions."""

import pytest

from sogrinha.core.modules.attachment.models import AttachmentScope, EntityType
from sogrinha.core.modules.attachment.storage import (
    copy_attachment_file,
    delete_attachment_file,
    get_attachment_file_path,
    get_scope_path,
    list_attachment_files,
    write_attachment_file,
)
from sogrinha.errors import NotFoundError, ValidationError


class TestGetScopePath:
    """Tests for get_scope_path function."""

    def test_layout(self, tmp_path):
        """Test that the folder is <data>/attachments/<type>/<identifier>/<id>."""
        scope = AttachmentScope(entity_type=EntityType.REAL_ESTATE, identifier="agency-1", entity_id="r7")
        assert get_scope_path(tmp_path, scope) == (tmp_path / "attachments" / "realEstates" / "agency-1" / "r7").resolve()

    def test_entity_type_values_match_folder_names(self):
        """Test that entity types keep their on-disk folder names."""
        assert [t.value for t in EntityType] == ["owners", "lessees", "realEstates", "contracts"]

    def test_does_not_create_folder(self, tmp_path, contract_scope):
        """Test that resolving a path has no filesystem effect."""
        path = get_scope_path(tmp_path, contract_scope)
        assert not path.exists()

    @pytest.mark.parametrize(("identifier", "entity_id"), [("..", "c1"), ("agency", ".."), ("a/b", "c1"), ("agency", "")])
    def test_unsafe_segments_rejected(self, tmp_path, identifier, entity_id):
        """Test that identifiers and ids that would escape their folder are rejected."""
        scope = AttachmentScope(entity_type=EntityType.OWNER, identifier=identifier, entity_id=entity_id)
        with pytest.raises(ValidationError):
            get_scope_path(tmp_path, scope)

    def test_unsafe_name_rejected(self, tmp_path, contract_scope):
        """Test that an attachment name with a parent reference is rejected."""
        with pytest.raises(ValidationError):
            get_attachment_file_path(tmp_path, contract_scope, "../../owners.pdf")


class TestListAttachmentFiles:
    """Tests for list_attachment_files function."""

    def test_creates_missing_folder(self, tmp_path, contract_scope):
        """Test that listing a new record creates its folder and returns nothing."""
        assert list_attachment_files(tmp_path, contract_scope) == []
        assert get_scope_path(tmp_path, contract_scope).is_dir()

    def test_existing_folder_listed_again(self, tmp_path, contract_scope):
        """Test that listing twice does not fail on the existing folder."""
        list_attachment_files(tmp_path, contract_scope)
        assert list_attachment_files(tmp_path, contract_scope) == []

    def test_names_sorted(self, tmp_path, contract_scope):
        """Test that names come back sorted."""
        for name in ("b.pdf", "a.pdf", "c.pdf"):
            write_attachment_file(tmp_path, contract_scope, name, b"%PDF")
        assert list_attachment_files(tmp_path, contract_scope) == ["a.pdf", "b.pdf", "c.pdf"]

    def test_scopes_isolated(self, tmp_path, contract_scope):
        """Test that another identifier does not see the files."""
        write_attachment_file(tmp_path, contract_scope, "a.pdf", b"%PDF")
        other = contract_scope.model_copy(update={"identifier": "agency-2"})
        assert list_attachment_files(tmp_path, other) == []


class TestWriteAttachmentFile:
    """Tests for write_attachment_file function."""

    def test_writes_content(self, tmp_path, contract_scope):
        """Test that the returned path holds exactly the content."""
        path = write_attachment_file(tmp_path, contract_scope, "a.pdf", b"\x00\x01binary")
        assert path.read_bytes() == b"\x00\x01binary"

    def test_overwrites_same_name(self, tmp_path, contract_scope):
        """Test that a second write truncates and replaces the first."""
        write_attachment_file(tmp_path, contract_scope, "a.pdf", b"long original content")
        path = write_attachment_file(tmp_path, contract_scope, "a.pdf", b"short")
        assert path.read_bytes() == b"short"
        assert list_attachment_files(tmp_path, contract_scope) == ["a.pdf"]

    def test_empty_content(self, tmp_path, contract_scope):
        """Test that an empty file can be stored."""
        path = write_attachment_file(tmp_path, contract_scope, "empty.pdf", b"")
        assert path.read_bytes() == b""


class TestDeleteAttachmentFile:
    """Tests for delete_attachment_file function."""

    def test_removes_file(self, tmp_path, contract_scope):
        """Test that the file is gone after delete."""
        write_attachment_file(tmp_path, contract_scope, "a.pdf", b"x")
        delete_attachment_file(tmp_path, contract_scope, "a.pdf")
        assert list_attachment_files(tmp_path, contract_scope) == []

    def test_missing_file(self, tmp_path, contract_scope):
        """Test that deleting an absent attachment raises NotFoundError."""
        with pytest.raises(NotFoundError):
            delete_attachment_file(tmp_path, contract_scope, "missing.pdf")


class TestCopyAttachmentFile:
    """Tests for copy_attachment_file function."""

    def test_byte_identical_copy(self, tmp_path, contract_scope):
        """Test that the destination gets the same bytes."""
        content = bytes(range(256)) * 4
        write_attachment_file(tmp_path, contract_scope, "a.pdf", content)
        destination = tmp_path / "out.pdf"
        assert copy_attachment_file(tmp_path, contract_scope, "a.pdf", destination) == destination
        assert destination.read_bytes() == content

    def test_missing_source(self, tmp_path, contract_scope):
        """Test that exporting an absent attachment raises NotFoundError and writes nothing."""
        destination = tmp_path / "out.pdf"
        with pytest.raises(NotFoundError):
            copy_attachment_file(tmp_path, contract_scope, "missing.pdf", destination)
        assert not destination.exists()
