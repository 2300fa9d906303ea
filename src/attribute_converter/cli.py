"""Command-line interface for the Attribute Converter."""

import logging
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .converter import AttributeConverter
from .error_handler import ErrorHandler
from .io import AttributeJSONCodec
from .models import ConverterOptions
from .types import ConversionError, DateFormat


logger = logging.getLogger("attribute_converter")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_input(input_file: Path, error_handler: ErrorHandler) -> str:
    """Read and syntax-check an input document, exiting on failure."""
    json_content = input_file.read_text(encoding='utf-8')
    validation = error_handler.validate_input(json_content)
    if not validation.is_valid:
        click.echo("❌ Invalid input:")
        for error in validation.errors:
            click.echo(f"   • {error.message} ({error.location})")
        raise SystemExit(1)
    return json_content


def _write_output(text: str, output: Optional[str]) -> None:
    if output:
        output_path = Path(output)
        output_path.write_text(text, encoding='utf-8')
        click.echo(f"✅ Successfully wrote {output_path}")
    else:
        click.echo(text)


def _report_error(error: ConversionError, error_handler: ErrorHandler) -> None:
    response = error_handler.handle_conversion_error(error)
    click.echo(f"❌ Error: {error}")
    click.echo(f"   • {response.suggested_action}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """Attribute Converter - Convert between native JSON records and tagged attributes."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output JSON file path (default: stdout)')
@click.option('--convert-empty-values', is_flag=True,
              help='Encode empty strings, binaries and sets as NULL')
@click.option('--date-format', type=click.Choice([f.value for f in DateFormat]),
              default=DateFormat.ISO.value, help='Date encoding (default: iso)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def marshall(input_file: Path, output: Optional[str], convert_empty_values: bool,
             date_format: str, verbose: bool):
    """Marshall a native JSON record into tagged attributes."""
    _configure_logging(verbose)
    error_handler = ErrorHandler(logger)
    codec = AttributeJSONCodec(logger=logger)
    json_content = _read_input(input_file, error_handler)

    options = ConverterOptions(
        convert_empty_values=convert_empty_values,
        date_format=date_format,
    )
    logger.info(f"Marshalling {input_file} with options {options.to_dict()}")

    try:
        record = AttributeConverter(options, logger).marshall(codec.load_native(json_content))
    except ConversionError as e:
        _report_error(e, error_handler)
    else:
        _write_output(codec.dump(record), output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output JSON file path (default: stdout)')
@click.option('--wrap-numbers', is_flag=True,
              help='Decode numbers through NumberValue wrappers')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def unmarshall(input_file: Path, output: Optional[str], wrap_numbers: bool, verbose: bool):
    """Unmarshall a tagged attribute record back into native JSON."""
    _configure_logging(verbose)
    error_handler = ErrorHandler(logger)
    codec = AttributeJSONCodec(logger=logger)
    json_content = _read_input(input_file, error_handler)

    options = ConverterOptions(wrap_numbers=wrap_numbers)
    logger.info(f"Unmarshalling {input_file} with options {options.to_dict()}")

    try:
        record = AttributeConverter(options, logger).unmarshall(codec.load_attributes(json_content))
    except ConversionError as e:
        _report_error(e, error_handler)
    else:
        _write_output(codec.dump(record), output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def validate(input_file: Path, verbose: bool):
    """Check that every attribute in a tagged record has exactly one type key."""
    _configure_logging(verbose)
    error_handler = ErrorHandler(logger)
    codec = AttributeJSONCodec(logger=logger)
    json_content = _read_input(input_file, error_handler)

    result = error_handler.validate_record(codec.load_attributes(json_content))
    for warning in result.warnings:
        click.echo(f"⚠️  {warning}")

    if result.is_valid:
        click.echo(f"✅ {input_file} is a valid attribute record")
    else:
        click.echo("❌ Validation failed:")
        for error in result.errors:
            click.echo(f"   • {error.location}: {error.message}")
        raise SystemExit(1)


if __name__ == '__main__':
    main()
