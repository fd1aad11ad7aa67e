import pytest
from crosspath.core.errors import DriveMappingError, PlatformError
from crosspath.core.models import (
    PathConfig, PathStyle, ParsedPath, DiskInfo, parse_drive_mappings,
)
from crosspath.utils.platform import PlatformInfo


class TestPathStyle:
    def test_parse_names_and_values(self):
        assert PathStyle.parse("windows") is PathStyle.WINDOWS
        assert PathStyle.parse("UNIX") is PathStyle.UNIX
        assert PathStyle.parse(" Auto ") is PathStyle.AUTO
        assert PathStyle.parse(PathStyle.UNIX) is PathStyle.UNIX

    def test_parse_unknown(self):
        with pytest.raises(PlatformError):
            PathStyle.parse("dos")

    def test_separators(self):
        assert PathStyle.WINDOWS.separator == "\\"
        assert PathStyle.UNIX.separator == "/"
        with pytest.raises(PlatformError):
            PathStyle.AUTO.separator


class TestPathConfig:
    def test_default_config(self):
        config = PathConfig()
        assert config.style is PathStyle.AUTO
        assert config.preserve_encoding is True
        assert config.security_check is True
        assert config.normalize is True
        assert config.drive_mappings == [
            ("C:", "/mnt/c"),
            ("D:", "/mnt/d"),
            ("E:", "/mnt/e"),
        ]

    def test_defaults_are_not_shared(self):
        first = PathConfig()
        first.drive_mappings.append(("Z:", "/network"))
        assert ("Z:", "/network") not in PathConfig().drive_mappings

    def test_style_given_as_text(self):
        assert PathConfig(style="unix").style is PathStyle.UNIX

    def test_invalid_drive_key(self):
        with pytest.raises(DriveMappingError):
            PathConfig(drive_mappings=[("CC:", "/mnt/c")])

    def test_relative_unix_prefix(self):
        with pytest.raises(DriveMappingError):
            PathConfig(drive_mappings=[("Z:", "network")])

    def test_malformed_mapping(self):
        with pytest.raises(DriveMappingError):
            PathConfig(drive_mappings=["Z:/network"])

    def test_trailing_slash_dropped(self):
        config = PathConfig(drive_mappings=[("Z:", "/network/")])
        assert config.drive_mappings == [("Z:", "/network")]

    def test_lookup_unix_prefix_is_case_sensitive(self):
        config = PathConfig()
        assert config.lookup_unix_prefix("D:") == "/mnt/d"
        assert config.lookup_unix_prefix("d:") is None

    def test_first_mapping_wins(self):
        config = PathConfig(drive_mappings=[("X:", "/data"), ("Y:", "/data")])
        assert config.lookup_windows_drive("/data/file") == ("X:", "/file")

    def test_lookup_respects_component_boundary(self):
        config = PathConfig()
        assert config.lookup_windows_drive("/mnt/cdrom/disc") is None
        assert config.lookup_windows_drive("/mnt/c") == ("C:", "")

    def test_resolve_style(self):
        assert PathConfig(style=PathStyle.UNIX).resolve_style() is PathStyle.UNIX
        assert PathConfig().resolve_style(PlatformInfo("win32")) is PathStyle.WINDOWS
        assert PathConfig().resolve_style(PlatformInfo("linux")) is PathStyle.UNIX


class TestConfigFromEnv:
    def test_defaults_without_environment(self):
        assert PathConfig.from_env() == PathConfig()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CROSSPATH_STYLE", "windows")
        monkeypatch.setenv("CROSSPATH_SECURITY_CHECK", "off")
        monkeypatch.setenv("CROSSPATH_NORMALIZE", "0")
        monkeypatch.setenv("CROSSPATH_DRIVE_MAPPINGS", "Z:=/network; C:=/mnt/c")

        config = PathConfig.from_env()
        assert config.style is PathStyle.WINDOWS
        assert config.security_check is False
        assert config.normalize is False
        assert config.preserve_encoding is True
        assert config.drive_mappings == [("Z:", "/network"), ("C:", "/mnt/c")]

    def test_bad_flag(self, monkeypatch):
        monkeypatch.setenv("CROSSPATH_NORMALIZE", "maybe")
        with pytest.raises(PlatformError):
            PathConfig.from_env()


class TestParseDriveMappings:
    def test_parse(self):
        assert parse_drive_mappings("Z:=/network,Y:=/y") == [("Z:", "/network"), ("Y:", "/y")]

    def test_missing_separator(self):
        with pytest.raises(DriveMappingError):
            parse_drive_mappings("Z:/network")


class TestParsedPath:
    def test_drive_and_file_name(self):
        parsed = ParsedPath(original="C:\\a\\b.txt", components=["a", "b.txt"],
                            is_absolute=True, has_drive=True, drive_letter="C")
        assert parsed.drive == "C:"
        assert parsed.file_name == "b.txt"

    def test_empty(self):
        parsed = ParsedPath(original="")
        assert parsed.drive is None
        assert parsed.file_name is None
        assert parsed.components == []


class TestDiskInfo:
    def test_used_space(self):
        disk = DiskInfo(total_space=100, free_space=30, filesystem_type="ext4")
        assert disk.used_space == 70
