"""Command-line interface for the XML/JSON converter."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .types import ConversionResult, SourceFormat
from .xml_json_converter import XMLJSONConverter


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")


def _emit(result: ConversionResult, output: Optional[Path]) -> None:
    if not result.success:
        click.echo("❌ Conversion failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    if output:
        output.write_text(result.output, encoding="utf-8")
        click.echo(f"✅ Successfully wrote {result.source_format.value.upper()} conversion to {output}")
    else:
        click.echo(result.output)


@click.group()
@click.version_option(version=__version__)
def main():
    """XML/JSON Converter - Parse XML and JSON and convert between them."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path (default: stdout)')
@click.option('--indent', '-i', type=click.IntRange(min=0), default=None,
              help='Pretty-print with this many spaces per level')
@click.option('--attribute-prefix', default='@', show_default=True,
              help='Prefix for attribute keys in the JSON output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def xml2json(input_file: Path, output: Optional[Path], indent: Optional[int],
             attribute_prefix: str, verbose: bool):
    """Convert an XML file to JSON."""
    _configure_logging(verbose)
    converter = XMLJSONConverter(indent=indent, attribute_prefix=attribute_prefix,
                                 enable_profiling=verbose)
    result = converter.xml_to_json(input_file.read_text(encoding='utf-8'))
    _emit(result, output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output XML file path (default: stdout)')
@click.option('--root-tag', '-r', default='root', show_default=True,
              help='Root tag when the JSON has no single top-level key')
@click.option('--item-tag', default='item', show_default=True,
              help='Tag for entries of unnamed arrays')
@click.option('--attribute-prefix', default='@', show_default=True,
              help='Prefix marking attribute keys in the JSON input')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def json2xml(input_file: Path, output: Optional[Path], root_tag: str, item_tag: str,
             attribute_prefix: str, verbose: bool):
    """Convert a JSON file to XML."""
    _configure_logging(verbose)
    try:
        converter = XMLJSONConverter(root_tag=root_tag, item_tag=item_tag,
                                     attribute_prefix=attribute_prefix,
                                     enable_profiling=verbose)
    except ValueError as e:
        raise click.BadParameter(str(e))
    result = converter.json_to_xml(input_file.read_text(encoding='utf-8'))
    _emit(result, output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--format', '-f', 'source_format', default='auto', show_default=True,
              type=click.Choice(['auto', 'json', 'xml']),
              help='Input format')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def validate(input_file: Path, source_format: str, verbose: bool):
    """Check that a JSON or XML file parses."""
    _configure_logging(verbose)
    text = input_file.read_text(encoding='utf-8')
    fmt = None if source_format == 'auto' else SourceFormat(source_format)

    converter = XMLJSONConverter(enable_profiling=False)
    result = converter.validate(text, fmt)

    if result.success:
        click.echo(f"✅ {input_file} is well-formed")
    else:
        error = result.error
        click.echo(f"❌ {input_file}: {error.kind.value}: {error}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
