"""
Command-line interface for geojson-codec.
"""

import logging
import sys

import click
import requests

from geojson_codec import __version__
from geojson_codec.base import GeoJSONObject
from geojson_codec.config import CodecConfig
from geojson_codec.feature import Feature, FeatureCollection
from geojson_codec.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_codec.registry import get_supported_types
from geojson_codec.sources import load, load_url


# Custom help class for better formatting
class CustomGroup(click.Group):
    """Custom group with better help formatting."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write the help into the formatter with additional info."""
        self.format_usage(ctx, formatter)
        self.format_help_text(ctx, formatter)
        self.format_options(ctx, formatter)
        self.format_commands(ctx, formatter)

        # Add examples section
        formatter.write_paragraph()
        with formatter.section("Examples"):
            formatter.write_text("gjc validate data.geojson")
            formatter.write_text("gjc validate --url https://example.com/data.geojson")
            formatter.write_text("gjc format input.geojson output.geojson --pretty")
            formatter.write_text("gjc types")


def _summary(obj: GeoJSONObject) -> str:
    """Short description of a decoded value's contents."""
    if isinstance(obj, Point):
        return f"{len(obj.coordinates)}-D position"
    if isinstance(obj, (MultiPoint, LineString)):
        return f"{len(obj.points)} points"
    if isinstance(obj, MultiLineString):
        return f"{len(obj.line_strings)} line strings"
    if isinstance(obj, Polygon):
        return f"{len(obj.rings)} rings"
    if isinstance(obj, MultiPolygon):
        return f"{len(obj.polygons)} polygons"
    if isinstance(obj, GeometryCollection):
        return f"{len(obj.geometries)} geometries"
    if isinstance(obj, Feature):
        geometry = obj.geometry.type.value if obj.geometry is not None else "none"
        return f"geometry: {geometry}"
    if isinstance(obj, FeatureCollection):
        return f"{len(obj.features)} features"
    return ""


@click.group(cls=CustomGroup)
@click.version_option(version=__version__, prog_name="geojson-codec")
def main() -> None:
    """
    geojson-codec - Decode, validate and re-encode GeoJSON.

    Checks documents against the GeoJSON grammar (RFC 7946 object
    structure, coordinate arity, ring closure) and writes them back in
    minimal form.

    \b
    Optional environment variables:
      GEOJSON_CODEC_INDENT     Default indentation for `format`
      GEOJSON_CODEC_SORT_KEYS  Sort keys in `format` output (1/true)
      GEOJSON_CODEC_TIMEOUT    HTTP timeout in seconds for --url

    \b
    For more help on a specific command:
      gjc COMMAND --help
    """
    pass


@main.command()
def types() -> None:
    """
    List the GeoJSON object types understood by the codec.

    \b
    Examples:
      gjc types
    """
    click.echo("\n📐 Supported GeoJSON Types\n")
    click.echo("-" * 60)

    for info in get_supported_types():
        kind = "geometry" if info["geometry"] else "feature"
        click.echo(f"   {info['type']:<20} {kind:<10} member: {info['prefix']}")

    click.echo("-" * 60 + "\n")


@main.command()
@click.argument("source", required=False, type=click.Path(exists=True))
@click.option("--url", "-u", help="URL to fetch the document from")
@click.option(
    "--timeout",
    envvar="GEOJSON_CODEC_TIMEOUT",
    default=30.0,
    type=float,
    help="HTTP timeout in seconds",
)
@click.option("--verbose", "-v", is_flag=True, help="Log decoding details")
def validate(
    source: str | None,
    url: str | None,
    timeout: float,
    verbose: bool,
) -> None:
    """
    Validate a GeoJSON document.

    Reads SOURCE, or fetches --url, and reports whether it decodes.

    \b
    Examples:
      gjc validate data.geojson
      gjc validate --url https://example.com/data.geojson
    """
    if not source and not url:
        raise click.UsageError("Either SOURCE or --url must be provided")

    if source and url:
        raise click.UsageError("Cannot specify both SOURCE and --url")

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    click.echo(f"\n🔍 Validating: {url or source}\n")

    try:
        if url:
            geojson = load_url(url, CodecConfig(fetch_timeout=timeout))
        else:
            geojson = load(source)  # type: ignore[arg-type]
    except (OSError, ValueError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    value, error = geojson.value, geojson.error
    if value is None:
        click.echo("❌ Invalid GeoJSON")
        if error is not None:
            click.echo(f"   Error: {error.message}")
            click.echo(f"   Code: {error.code.name} ({int(error.code)})")
        sys.exit(1)

    click.echo(f"   Type: {value.type.value}")
    click.echo(f"   Contents: {_summary(value)}")
    if geojson.bbox is not None:
        click.echo(f"   BBox: {list(geojson.bbox)}")
    click.echo("\n✅ Valid GeoJSON")


@main.command("format")
@click.argument("input_file", type=click.Path(exists=True))
@click.argument("output_file", type=click.Path(), required=False)
@click.option("--pretty", "-p", is_flag=True, help="Pretty-print output JSON")
@click.option("--indent", type=int, envvar="GEOJSON_CODEC_INDENT", help="Indentation width")
@click.option("--sort-keys", is_flag=True, envvar="GEOJSON_CODEC_SORT_KEYS", help="Sort keys")
def format_document(
    input_file: str,
    output_file: str | None,
    pretty: bool,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """
    Decode a GeoJSON file and write it back in minimal form.

    Writes to OUTPUT_FILE, or to standard output when it is omitted.

    \b
    Examples:
      gjc format input.geojson output.geojson
      gjc format input.geojson --pretty
    """
    if pretty and indent is None:
        indent = 2

    try:
        config = CodecConfig(indent=indent, sort_keys=sort_keys)
        geojson = load(input_file)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    if geojson.error is not None:
        raise click.ClickException(f"Invalid GeoJSON: {geojson.error.message}")

    text = geojson.to_json(config)
    if output_file is None:
        click.echo(text)
        return

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(text)
        f.write("\n")

    click.echo(f"\n✅ Wrote {geojson.type} to {output_file}")
