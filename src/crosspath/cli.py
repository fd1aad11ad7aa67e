"""Command-line interface for crosspath."""
import sys
import logging
from dataclasses import replace

import click

from . import __version__
from .adapters import PROVIDERS, create_metadata_provider
from .core.cross_path import CrossPath
from .core.errors import PathError, PathIOError
from .core.models import PathConfig, PathStyle, parse_drive_mappings
from .utils.console import THEMES, ConsoleManager
from .utils.encodings import EncodingNormalizer
from .utils.security import PathSecurityChecker, sanitize_path

STYLE_CHOICES = click.Choice([style.value for style in PathStyle], case_sensitive=False)


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(name)s: %(message)s' if debug else '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _fail(ctx: click.Context, error: Exception) -> None:
    console: ConsoleManager = ctx.obj['console']
    console.print_error(str(error))
    if ctx.obj.get('debug'):
        console.console.print_exception()
    ctx.exit(1)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--plain', is_flag=True, help='Disable colored output')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.version_option(version=__version__, prog_name='crosspath')
@click.pass_context
def main(ctx: click.Context, debug: bool, plain: bool, theme: str) -> None:
    """
    Convert, check and normalize paths across Windows and Unix.

    Settings are read from CROSSPATH_* environment variables (or a .env
    file) and can be overridden per command.

    Examples:

        crosspath convert 'C:\\Users\\me\\file.txt' --to unix

        crosspath convert /mnt/d/data --to windows

        crosspath check ../../etc/passwd
    """
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['console'] = ConsoleManager(theme=theme, force_plain=plain)
    try:
        ctx.obj['config'] = PathConfig.from_env()
    except PathError as e:
        _fail(ctx, e)


@main.command()
@click.argument('path')
@click.option('--to', 'target', type=STYLE_CHOICES, default='auto',
              help='Target style (auto uses CROSSPATH_STYLE or the host style)')
@click.option('--normalize', 'resolve_dots', is_flag=True,
              help="Resolve '.' and '..' before converting")
@click.option('--map', 'mappings', multiple=True, metavar='DRIVE=PREFIX',
              help='Extra drive mapping, tried before the configured ones')
@click.option('--format', 'from_parsed', is_flag=True,
              help='Render from the parsed structure instead of rewriting the string')
@click.pass_context
def convert(ctx: click.Context, path: str, target: str, resolve_dots: bool,
            mappings: tuple, from_parsed: bool) -> None:
    """Convert PATH to another style."""
    console: ConsoleManager = ctx.obj['console']
    config: PathConfig = ctx.obj['config']
    try:
        if mappings:
            extra = parse_drive_mappings(';'.join(mappings))
            config = replace(config, drive_mappings=extra + config.drive_mappings)

        cross = CrossPath.with_config(path, config)
        if resolve_dots:
            cross.normalize()

        style = PathStyle.parse(target)
        if from_parsed:
            result = cross.format(style if style is not PathStyle.AUTO else config.resolve_style())
        elif style is PathStyle.AUTO:
            result = cross.to_platform()
        else:
            result = cross.to_style(style)
    except PathError as e:
        _fail(ctx, e)
        return

    console.print_value(result)


@main.command()
@click.argument('path')
@click.pass_context
def detect(ctx: click.Context, path: str) -> None:
    """Print the style PATH is written in."""
    console: ConsoleManager = ctx.obj['console']
    console.print_value(CrossPath(path).original_style.value)


@main.command()
@click.argument('path')
@click.option('--style', type=STYLE_CHOICES, default='auto',
              help='Rules to apply (auto uses the host platform)')
@click.pass_context
def check(ctx: click.Context, path: str, style: str) -> None:
    """Check PATH against dangerous patterns. Exits with 1 when one matches."""
    console: ConsoleManager = ctx.obj['console']
    try:
        PathSecurityChecker().check(path, PathStyle.parse(style))
    except PathError as e:
        _fail(ctx, e)
        return

    console.print_success(f"No dangerous pattern found in {path}")


@main.command()
@click.argument('path')
@click.pass_context
def sanitize(ctx: click.Context, path: str) -> None:
    """Print PATH with traversal sequences and reserved characters removed."""
    ctx.obj['console'].print_value(sanitize_path(path))


@main.command()
@click.argument('path')
@click.pass_context
def normalize(ctx: click.Context, path: str) -> None:
    """Print PATH with '.' and '..' segments resolved."""
    cross = CrossPath(path)
    cross.normalize()
    ctx.obj['console'].print_value(cross.as_original())


@main.command()
@click.argument('path')
@click.option('--provider', type=click.Choice(sorted(PROVIDERS)), default=None,
              help='Metadata provider (default: CROSSPATH_METADATA_PROVIDER or local)')
@click.pass_context
def info(ctx: click.Context, path: str, provider: str) -> None:
    """Show file attributes and disk usage for PATH on this host."""
    console: ConsoleManager = ctx.obj['console']
    config: PathConfig = ctx.obj['config']
    try:
        native = CrossPath.with_config(path, replace(config, style=PathStyle.AUTO)).to_platform()
        metadata = create_metadata_provider(provider)
    except PathError as e:
        _fail(ctx, e)
        return

    console.print_info_with_heading("PATH:", native)
    if not metadata.is_accessible(native):
        console.print_warning(f"Not accessible: {native}")
        ctx.exit(1)

    attributes = metadata.get_attributes(native)
    if attributes:
        console.print_table("Attributes", {
            'size': f"{attributes.size:,}",
            'directory': attributes.is_directory,
            'hidden': attributes.is_hidden,
            'readonly': attributes.is_readonly,
            'created': attributes.creation_time,
            'modified': attributes.modification_time,
        })

    disk = metadata.get_disk_info(native)
    if disk:
        console.print_table("Disk", {
            'filesystem': disk.filesystem_type,
            'total': f"{disk.total_space:,}",
            'used': f"{disk.used_space:,}",
            'free': f"{disk.free_space:,}",
        })


@main.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--encoding', default=None, help='Declared encoding (detected when omitted)')
@click.pass_context
def decode(ctx: click.Context, file: str, encoding: str) -> None:
    """Decode a path stored as raw bytes in FILE."""
    console: ConsoleManager = ctx.obj['console']
    normalizer = EncodingNormalizer()

    try:
        with open(file, 'rb') as f:
            content = f.read()
        text, used = normalizer.decode_bytes(content, encoding)
    except OSError as e:
        _fail(ctx, PathIOError.from_os_error(e, file))
        return
    except PathError as e:
        _fail(ctx, e)
        return

    has_bom, bom_encoding = normalizer.has_bom(content)
    console.print_info_with_heading("ENCODING:", used)
    if has_bom:
        console.print_info_with_heading("BOM:", bom_encoding)
    console.print_value(text.rstrip('\r\n'))


if __name__ == '__main__':
    main()
