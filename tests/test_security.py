import pytest
from pathlib import PurePosixPath
from crosspath.core.errors import SecurityError
from crosspath.core.models import PathStyle
from crosspath.core.parser import parse
from crosspath.utils.platform import PlatformInfo
from crosspath.utils.security import (
    PathSecurityChecker, check_path_security, sanitize_path, MAX_SANITIZED_LENGTH,
)


@pytest.fixture
def checker():
    return PathSecurityChecker(PlatformInfo("linux"))


class TestTraversal:
    @pytest.mark.parametrize("path", ["../etc/passwd", r"foo\..\bar", "a/b/../../c"])
    def test_detected(self, checker, path):
        with pytest.raises(SecurityError, match="Path traversal attack detected"):
            checker.check(path, PathStyle.UNIX)

    def test_dots_in_names_are_fine(self, checker):
        assert checker.check("/home/user/notes..txt", PathStyle.UNIX) is True
        assert not checker.detect_path_traversal("..hidden")


class TestDangerousPatterns:
    @pytest.mark.parametrize("path", [
        "/home/user/run.sh", "tool.EXE", "setup.py", r"C:\scripts\go.bat",
        "/proc/self/environ", "/dev/sda", "/sys/kernel",
    ])
    def test_detected(self, checker, path):
        with pytest.raises(SecurityError, match="Path contains dangerous patterns"):
            checker.check(path, PathStyle.UNIX)

    def test_extension_must_be_final(self, checker):
        assert checker.check("/home/user/archive.sh.txt", PathStyle.UNIX) is True


class TestReservedNames:
    @pytest.mark.parametrize("path", [r"D:\temp\CON", r"D:\temp\con.txt", "lpt1.log", "nul"])
    def test_windows_style(self, checker, path):
        with pytest.raises(SecurityError, match="Path contains Windows reserved names"):
            checker.check(path, PathStyle.WINDOWS)

    def test_ignored_for_unix_style(self, checker):
        assert checker.check("/home/user/con.txt", PathStyle.UNIX) is True

    def test_only_file_name_counts(self, checker):
        assert checker.check(r"D:\aux\notes.txt", PathStyle.WINDOWS) is True
        assert checker.check(r"D:\temp\console.txt", PathStyle.WINDOWS) is True

    def test_host_style_by_default(self, windows_host):
        with pytest.raises(SecurityError):
            PathSecurityChecker().check(r"D:\temp\nul")

    def test_unix_host_skips_reserved_names(self, unix_host):
        assert PathSecurityChecker().check("nul") is True


class TestSystemDirectories:
    @pytest.mark.parametrize("path", [r"C:\Windows\System32\drivers", "c:/windows", r"C:\Program Files\App"])
    def test_windows(self, checker, path):
        with pytest.raises(SecurityError, match="Attempt to access system directories"):
            checker.check(path, PathStyle.WINDOWS)

    def test_windows_needs_component_boundary(self, checker):
        assert checker.check(r"C:\WindowsApps\thing", PathStyle.WINDOWS) is True

    @pytest.mark.parametrize("path", ["/etc/passwd", "/etc", "/usr/bin/env", "/root/.ssh/id_rsa", "/proc"])
    def test_unix(self, checker, path):
        with pytest.raises(SecurityError):
            checker.check(path, PathStyle.UNIX)

    def test_unix_needs_component_boundary(self, checker):
        assert checker.check("/etcetera/file", PathStyle.UNIX) is True
        assert checker.check("/binaries/tool", PathStyle.UNIX) is True
        assert checker.check("/home/user/docs", PathStyle.UNIX) is True

    def test_android_extras(self):
        android = PathSecurityChecker(PlatformInfo("android"))
        assert not android.is_safe("/system/app", PathStyle.UNIX)
        assert PathSecurityChecker(PlatformInfo("linux")).is_safe("/system/app", PathStyle.UNIX)

    def test_macos_extras(self):
        macos = PathSecurityChecker(PlatformInfo("darwin"))
        assert not macos.is_safe("/Library/Preferences", PathStyle.UNIX)
        assert "/Library" not in PathSecurityChecker(PlatformInfo("linux")).system_directories(PathStyle.UNIX)

    def test_windows_list_ignores_flavor(self):
        dirs = PathSecurityChecker(PlatformInfo("android")).system_directories(PathStyle.WINDOWS)
        assert "/system" not in dirs


class TestInputs:
    def test_parsed_path(self, checker):
        assert not checker.is_safe(parse("/etc/hosts"), PathStyle.UNIX)

    def test_path_like(self, checker):
        assert not checker.is_safe(PurePosixPath("/etc/hosts"), PathStyle.UNIX)

    def test_is_safe_returns_bool(self, checker):
        assert checker.is_safe("docs/readme.md", PathStyle.UNIX) is True
        assert checker.is_safe("../secret", PathStyle.UNIX) is False

    def test_module_function(self, unix_host):
        assert check_path_security("docs/readme.md") is True
        with pytest.raises(SecurityError):
            check_path_security(r"..\x", PathStyle.WINDOWS)


class TestSanitize:
    def test_removes_traversal(self):
        assert sanitize_path("../../etc/passwd") == "etc_passwd"

    def test_replaces_reserved_characters(self):
        assert sanitize_path(r"C:\a<b>.txt") == "C__a_b_.txt"
        assert sanitize_path('what?"*|') == "what____"
        assert sanitize_path("a\0b") == "a_b"

    def test_truncates(self):
        assert len(sanitize_path("a" * 300)) == MAX_SANITIZED_LENGTH
        assert sanitize_path("a" * 255) == "a" * 255

    def test_plain_name_unchanged(self):
        assert PathSecurityChecker.sanitize("report-2024.txt") == "report-2024.txt"
