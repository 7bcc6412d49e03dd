"""
Tests for the public scanning API (Utilities.pdfscanner) and the scan_pdf CLI.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from Matchers.base.base_matcher import KeywordError
from Utilities.config.scan import ENCRYPT_KEYWORD, SCAN_CONFIG
from Utilities.pdfscanner import (
    is_password_protected,
    is_password_protected_simple,
    scan_file,
    scan_parallel,
    scan_simple,
)

ENCRYPTED_TRAILER = (
    b"%PDF-1.6\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
    b"trailer\n<< /Size 12 /Root 1 0 R /Encrypt 11 0 R /ID [<ab><cd>] >>\n"
    b"startxref\n1234\n%%EOF\n"
)
PLAIN_TRAILER = ENCRYPTED_TRAILER.replace(b"/Encrypt 11 0 R ", b"")


class TestConfiguration:

    def test_keyword(self):
        assert ENCRYPT_KEYWORD == b"/Encrypt"

    def test_scan_config_defaults(self):
        assert SCAN_CONFIG['oversubscription'] == 2
        assert SCAN_CONFIG['executor'] in ('process', 'thread')
        assert SCAN_CONFIG['overlap_boundaries'] is False
        assert SCAN_CONFIG['min_parallel_size'] > 0

    def test_runtime_import_needs_only_psutil(self):
        import subprocess
        project_root = Path(__file__).parent.parent
        code = (
            "import sys, Utilities.pdfscanner, scan_pdf; "
            "print(sorted(m for m in ('numpy', 'pandas') if m in sys.modules))"
        )
        out = subprocess.run(
            [sys.executable, "-c", code], cwd=project_root,
            capture_output=True, text=True, check=True,
        ).stdout
        assert out.strip() == "[]"


class TestScenarios:
    """Fixed scenarios shared by both entry points."""

    @pytest.mark.parametrize("scan", [scan_parallel, scan_simple])
    def test_marker_present(self, scan):
        assert scan(b"xxxx/Encryptxxxx") is True

    @pytest.mark.parametrize("scan", [scan_parallel, scan_simple])
    def test_marker_absent(self, scan):
        assert scan(b"no marker here") is False

    @pytest.mark.parametrize("scan", [scan_parallel, scan_simple])
    def test_empty_buffer(self, scan):
        assert scan(b"") is False

    @pytest.mark.parametrize("scan", [scan_parallel, scan_simple])
    def test_short_buffer(self, scan):
        assert scan(b"/Encryp") is False

    def test_password_protected_helpers(self):
        assert is_password_protected(ENCRYPTED_TRAILER) is True
        assert is_password_protected_simple(ENCRYPTED_TRAILER) is True
        assert is_password_protected(PLAIN_TRAILER) is False
        assert is_password_protected_simple(PLAIN_TRAILER) is False

    def test_custom_keyword(self):
        assert scan_simple(b"%PDF-1.4 /Linearized 1", b"/Linearized") is True
        assert scan_parallel(b"%PDF-1.4 /Linearized 1", "/Linearized", executor="thread") is True

    def test_entry_points_agree_on_wide_memoryview(self):
        from array import array
        view = memoryview(array("I", b"x" * 64 + b"/Encrypt" + b"x" * 56))
        assert scan_simple(view) is True
        assert scan_parallel(view, parallelism=2, executor="thread", min_parallel_size=0) is True
        assert is_password_protected_simple(view) is True

    def test_boundary_split_documented_limitation(self):
        buffer = b"xxxx/Encryptxxxx"
        options = dict(parallelism=1, executor="thread", min_parallel_size=0)
        assert scan_simple(buffer) is True
        assert scan_parallel(buffer, **options) is False
        assert scan_parallel(buffer, overlap_boundaries=True, **options) is True


class TestErrors:

    def test_simple_rejects_str_buffer(self):
        with pytest.raises(TypeError):
            scan_simple("xx/Encryptxx")

    def test_parallel_rejects_str_buffer(self):
        with pytest.raises(TypeError):
            scan_parallel("xx/Encryptxx", executor="thread")

    def test_empty_keyword(self):
        with pytest.raises(KeywordError):
            scan_simple(b"data", b"")
        with pytest.raises(KeywordError):
            scan_parallel(b"data", b"")

    def test_non_positive_parallelism(self):
        with pytest.raises(ValueError):
            scan_parallel(b"data", parallelism=0)


class TestScanFile:

    def test_encrypted_file(self, tmp_path):
        path = tmp_path / "locked.pdf"
        path.write_bytes(ENCRYPTED_TRAILER)
        assert scan_file(path) is True
        assert scan_file(str(path), parallel=False) is True

    def test_plain_file(self, tmp_path):
        path = tmp_path / "open.pdf"
        path.write_bytes(PLAIN_TRAILER)
        assert scan_file(path, executor="thread") is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            scan_file(tmp_path / "missing.pdf")


class TestCli:

    def test_reports_each_file(self, tmp_path, capsys):
        from scan_pdf import main
        locked = tmp_path / "locked.pdf"
        locked.write_bytes(ENCRYPTED_TRAILER)
        plain = tmp_path / "open.pdf"
        plain.write_bytes(PLAIN_TRAILER)

        assert main([str(locked), str(plain), "--executor", "thread"]) == 0
        out = capsys.readouterr().out
        assert f"{locked}: password-protected" in out
        assert f"{plain}: not protected" in out

    def test_simple_mode(self, tmp_path, capsys):
        from scan_pdf import main
        locked = tmp_path / "locked.pdf"
        locked.write_bytes(ENCRYPTED_TRAILER)
        assert main(["--simple", str(locked)]) == 0
        assert "password-protected" in capsys.readouterr().out

    def test_missing_file_exit_status(self, tmp_path, capsys):
        from scan_pdf import main
        plain = tmp_path / "open.pdf"
        plain.write_bytes(PLAIN_TRAILER)
        assert main([str(tmp_path / "missing.pdf"), str(plain)]) == 2
        assert f"{plain}: not protected" in capsys.readouterr().out

    def test_custom_keyword(self, tmp_path, capsys):
        from scan_pdf import main
        doc = tmp_path / "doc.pdf"
        doc.write_bytes(PLAIN_TRAILER)
        assert main(["--keyword", "/Catalog", "--simple", str(doc)]) == 0
        assert "password-protected" in capsys.readouterr().out

    def test_invalid_workers(self, tmp_path):
        from scan_pdf import main
        doc = tmp_path / "doc.pdf"
        doc.write_bytes(PLAIN_TRAILER)
        assert main(["--workers", "0", str(doc)]) == 2
