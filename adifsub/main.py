"""unicode code point substitutions for ADIF fields"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import tqdm
import typer
from typer import colors

from adifsub.codec import decode as decode_field
from adifsub.codec import encode as encode_field
from adifsub.config import load_policy
from adifsub.fields import FieldPolicy

app = typer.Typer(
    name="adifsub",
    help="unicode code point substitutions for ADIF fields",
    add_completion=True,
    no_args_is_help=True,
)

DEFAULT_FIELD = "COMMENT"
END_OF_RECORD = "<EOR>"

# U+00E7 and U+00E9 are in the Latin-1 range, U+1F300 and U+1F3EF need
# surrogate pairs in UTF-16. U+007E is the highest US-ASCII character ADIF
# allows, U+00A1 the lowest printable one above it.
DEMO_STRINGS = (
    "",
    "US-ASCII only.",
    "Café François",
    "abc🌀🏯123",
    "🌀🏯",
    "~¡ÿĀ﹏",
)


def get_policy(config: Optional[Path]) -> FieldPolicy:
    """Load the field policy, exiting with an error message if the config is bad."""
    try:
        return load_policy(config)
    except ValueError as e:
        typer.echo(typer.style(str(e), fg=colors.RED))
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped and rejected substitutions",
    ),
) -> None:
    """Export and import non-US-ASCII text in ADIF fields."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def encode(
    field: str = typer.Argument(..., help="ADIF field name e.g. COMMENT"),
    text: str = typer.Argument(..., help="Value to export"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML file with fields and/or extra_fields lists",
    ),
) -> None:
    """Export a field value with its unicode substitution list"""
    policy = get_policy(config)
    exported = encode_field(field, text, policy)

    label = typer.style("Field data:", fg=colors.CYAN)
    typer.echo(f"{label} {exported.field_data}")
    label = typer.style("Substitutions:", fg=colors.CYAN)
    typer.echo(f"{label} {exported.substitutions}")
    label = typer.style("Export:", fg=colors.CYAN)
    typer.echo(f"{label} {exported.combined}")


@app.command()
def decode(
    field: str = typer.Argument(..., help="ADIF field name e.g. COMMENT"),
    field_data: str = typer.Argument(..., help="Imported field value e.g. 'abc??123'"),
    substitutions: str = typer.Argument(
        "",
        help="Imported substitution list e.g. '{{3=1F280,4=1F36F}}'",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML file with fields and/or extra_fields lists",
    ),
) -> None:
    """Import a field value, putting the substituted code points back"""
    policy = get_policy(config)
    typer.echo(decode_field(field, field_data, substitutions, policy))


@app.command()
def demo(
    field: str = typer.Option(DEFAULT_FIELD, "--field", "-f", help="Field name to use"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML file with fields and/or extra_fields lists",
    ),
) -> None:
    """Export and import a set of test strings, checking each one round trips"""
    policy = get_policy(config)
    failures = 0

    for test_string in DEMO_STRINGS:
        exported = encode_field(field, test_string, policy)
        imported = decode_field(
            field, exported.field_data, exported.substitutions, policy
        )

        typer.echo(f'Value: "{imported}"')
        typer.echo(f'Export: "{exported.combined}"')

        if imported != test_string:
            failures += 1
            typer.echo(
                typer.style(f'  Round trip failed for "{test_string}"', fg=colors.RED)
            )
        typer.echo()

    if failures:
        typer.echo(
            typer.style(f"{failures} value(s) did not round trip", fg=colors.RED)
        )
        raise typer.Exit(1)

    typer.echo(
        typer.style(
            f"All {len(DEMO_STRINGS)} values round tripped", fg=colors.GREEN, bold=True
        )
    )


def format_value(name: str, value: Any) -> str:
    """Render a JSON scalar as ADIF field text, booleans as Y or N"""
    if isinstance(value, bool):
        return "Y" if value else "N"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"Field '{name}' must be a string, number or boolean")


def export_record(record: dict[str, Any], policy: FieldPolicy) -> str:
    """Export one record as ADIF field definitions followed by end-of-record"""
    parts: list[str] = []
    for name, value in record.items():
        if value is None:
            continue
        parts.append(encode_field(name, format_value(name, value), policy).combined)
    parts.append(END_OF_RECORD)
    return "".join(parts)


@app.command()
def export(
    input_file: Path = typer.Argument(
        ...,
        help="JSON file with a list of records (field name -> value)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write ADIF here instead of standard output",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML file with fields and/or extra_fields lists",
    ),
) -> None:
    """Export JSON records as ADIF with unicode substitution lists"""
    policy = get_policy(config)

    if not input_file.exists():
        typer.echo(typer.style(f"Input file not found: {input_file}", fg=colors.RED))
        raise typer.Exit(1)

    with open(input_file, encoding="utf8") as f:
        try:
            records: list[dict[str, Any]] = json.load(f)
        except json.JSONDecodeError as e:
            typer.echo(typer.style(f"Invalid JSON in {input_file}: {e}", fg=colors.RED))
            raise typer.Exit(1) from e

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        typer.echo(
            typer.style(
                f"{input_file} must contain a list of JSON objects", fg=colors.RED
            )
        )
        raise typer.Exit(1)

    lines: list[str] = []
    with tqdm.tqdm(total=len(records), unit="rec", disable=output is None) as pbar:
        for i, record in enumerate(records, 1):
            try:
                lines.append(export_record(record, policy))
            except ValueError as e:
                typer.echo(typer.style(f"Record {i}: {e}", fg=colors.RED))
                raise typer.Exit(1) from e
            pbar.update(1)

    adif = "\n".join(lines) + "\n" if lines else ""

    if output is None:
        typer.echo(adif, nl=False)
        return

    with open(output, "w", encoding="utf8") as f:
        f.write(adif)

    typer.echo(
        f"\nExported {typer.style(str(len(records)), fg=colors.GREEN, bold=True)} "
        f"records to {output}"
    )


@app.command()
def fields(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML file with fields and/or extra_fields lists",
    ),
) -> None:
    """List the fields that may contain unicode substitutions"""
    policy = get_policy(config)
    for name in policy.fields:
        typer.echo(name)


if __name__ == "__main__":
    app()
