import pytest
from crosspath.core.converter import PathConverter
from crosspath.core.errors import ParseError, UnsupportedFormatError
from crosspath.core.models import PathConfig, PathStyle
from crosspath.utils.platform import PlatformInfo


@pytest.fixture
def converter():
    return PathConverter(PathConfig())


class TestWindowsToUnix:
    def test_default_mapping(self, converter):
        assert converter.convert(r"C:\Users\test\file.txt", PathStyle.UNIX) == "/mnt/c/Users/test/file.txt"

    def test_lowercase_drive_uses_default_mount(self, converter):
        assert converter.convert(r"c:\Users\test", PathStyle.UNIX) == "/mnt/c/Users/test"

    def test_unmapped_drive(self, converter):
        assert converter.convert(r"F:\media\song.mp3", PathStyle.UNIX) == "/mnt/f/media/song.mp3"

    def test_custom_mapping(self):
        converter = PathConverter(PathConfig(drive_mappings=[("Z:", "/network")]))
        assert converter.convert(r"Z:\shared\doc.txt", PathStyle.UNIX) == "/network/shared/doc.txt"

    def test_drive_root(self, converter):
        assert converter.convert("C:\\", PathStyle.UNIX) == "/mnt/c"
        assert converter.convert("D:", PathStyle.UNIX) == "/mnt/d"

    def test_unc(self, converter):
        assert converter.convert(r"\\server\share\path\to\file", PathStyle.UNIX) == "//server/share/path/to/file"

    def test_unc_share_only(self, converter):
        assert converter.convert("\\\\server\\share\\", PathStyle.UNIX) == "//server/share"

    def test_malformed_unc(self, converter):
        with pytest.raises(ParseError) as exc_info:
            converter.convert(r"\\server", PathStyle.UNIX)
        assert "Invalid UNC path" in str(exc_info.value)

    def test_collapses_and_trims(self, converter):
        assert converter.convert("C:\\Users\\\\test\\", PathStyle.UNIX) == "/mnt/c/Users/test"

    def test_relative(self, converter):
        assert converter.convert(r"docs\readme.md", PathStyle.UNIX) == "docs/readme.md"


class TestUnixToWindows:
    def test_reverse_default_mapping(self, converter):
        assert converter.convert("/mnt/c/Users/test/file.txt", PathStyle.WINDOWS) == r"C:\Users\test\file.txt"

    def test_custom_mapping(self):
        converter = PathConverter(PathConfig(drive_mappings=[("Z:", "/network")]))
        assert converter.convert("/network/shared/doc.txt", PathStyle.WINDOWS) == r"Z:\shared\doc.txt"

    def test_first_match_wins(self):
        config = PathConfig(drive_mappings=[("X:", "/data"), ("Y:", "/data")])
        assert PathConverter(config).convert("/data/a", PathStyle.WINDOWS) == r"X:\a"

    def test_unmapped_absolute_defaults_to_c(self, converter):
        assert converter.convert("/home/john/docs", PathStyle.WINDOWS) == r"C:\home\john\docs"

    def test_prefix_needs_component_boundary(self, converter):
        assert converter.convert("/mnt/cdrom/disc", PathStyle.WINDOWS) == r"C:\mnt\cdrom\disc"

    def test_mount_point_itself(self, converter):
        assert converter.convert("/mnt/d", PathStyle.WINDOWS) == "D:\\"

    def test_root(self, converter):
        assert converter.convert("/", PathStyle.WINDOWS) == "C:\\"

    def test_collapses_and_trims(self, converter):
        assert converter.convert("/mnt/e//backup/", PathStyle.WINDOWS) == r"E:\backup"

    def test_relative(self, converter):
        assert converter.convert("foo/bar/baz", PathStyle.WINDOWS) == r"foo\bar\baz"


class TestSameStyle:
    def test_unchanged_when_already_in_style(self, converter):
        assert converter.convert("/usr//bin/", PathStyle.UNIX) == "/usr//bin/"
        assert converter.convert("C:\\Users\\\\x\\", PathStyle.WINDOWS) == "C:\\Users\\\\x\\"

    def test_foreign_separators_are_normalized(self, converter):
        assert converter.convert("C:/Users\\test", PathStyle.WINDOWS) == r"C:\Users\test"
        assert converter.convert("/mnt/c/x\\y", PathStyle.UNIX) == "/mnt/c/x/y"

    def test_no_separator(self, converter):
        assert converter.convert("file.txt", PathStyle.UNIX) == "file.txt"
        assert converter.convert("file.txt", PathStyle.WINDOWS) == "file.txt"


class TestMixedSeparators:
    @pytest.mark.parametrize("host", ["linux", "win32"])
    def test_mixed_relative_path(self, host):
        converter = PathConverter(PathConfig(), PlatformInfo(host))
        assert converter.convert("foo/bar\\baz", PathStyle.UNIX) == "foo/bar/baz"
        assert converter.convert("foo/bar\\baz", PathStyle.WINDOWS) == r"foo\bar\baz"


class TestUnsupported:
    def test_auto_target(self, converter):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            converter.convert("/usr/bin", PathStyle.AUTO)
        assert "UNIX -> AUTO" in str(exc_info.value)


class TestDetectStyle:
    def test_bare_drive_is_windows(self, converter):
        assert converter.detect_style("C:") is PathStyle.WINDOWS

    def test_delegates_to_parser(self, converter):
        assert converter.detect_style("/a") is PathStyle.UNIX
        assert converter.detect_style("a\\b") is PathStyle.WINDOWS

    @pytest.mark.parametrize("host", ["linux", "win32"])
    def test_mixed_unc_keeps_server_root(self, host):
        converter = PathConverter(PathConfig(), PlatformInfo(host))
        assert converter.detect_style("\\\\server/share/file") is PathStyle.WINDOWS
        assert converter.convert("\\\\server/share/file", PathStyle.UNIX) == "//server/share/file"
        assert converter.convert("\\\\server/share/file", PathStyle.WINDOWS) == r"\\server\share\file"

    def test_mixed_with_drive_colon_is_windows(self):
        converter = PathConverter(PathConfig(), PlatformInfo("linux"))
        assert converter.detect_style("data/C:\\x") is PathStyle.WINDOWS

    def test_leading_slash_stays_unix(self):
        converter = PathConverter(PathConfig(), PlatformInfo("win32"))
        assert converter.detect_style("/a:\\b") is PathStyle.UNIX
