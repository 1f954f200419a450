"""Tests for the privileged save picker."""

from sogrinha.bridge.dialogs import DirectorySavePicker


class TestDirectorySavePicker:
    """Tests for DirectorySavePicker.ask_save_path."""

    def test_without_directory_is_dismissed(self):
        """Test that no configured directory counts as a dismissed picker."""
        assert DirectorySavePicker(None).ask_save_path("a.pdf") is None

    def test_default_name_in_directory(self, tmp_path):
        """Test that the default name is used when free, creating the directory."""
        downloads = tmp_path / "downloads"
        assert DirectorySavePicker(downloads).ask_save_path("lease.pdf") == downloads / "lease.pdf"
        assert downloads.is_dir()

    def test_never_clobbers(self, tmp_path):
        """Test that existing files get a numbered alternative."""
        (tmp_path / "lease.pdf").write_bytes(b"old")
        (tmp_path / "lease (1).pdf").write_bytes(b"old")
        assert DirectorySavePicker(tmp_path).ask_save_path("lease.pdf") == tmp_path / "lease (2).pdf"

    def test_directory_parts_dropped(self, tmp_path):
        """Test that a suggested name cannot point outside the directory."""
        picker = DirectorySavePicker(tmp_path)
        assert picker.ask_save_path("../../etc/passwd") == tmp_path / "passwd"
        assert picker.ask_save_path("..\\secret.txt") == tmp_path / "secret.txt"
        assert picker.ask_save_path("..") == tmp_path / "download"
