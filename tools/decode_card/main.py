"""
CLI tool to decode barcodes into cards.

Usage:
    poetry run python -m tools.decode_card.main 0401207336501
    poetry run python -m tools.decode_card.main 0401207336501 00123456 --format json
    poetry run python -m tools.decode_card.main "04012 07336 501" --explain
"""

import json
import sys

import click

from src.barcode import decode_barcode
from src.config import configure_logging, get_settings
from src.models import DecodedCard


def format_table(card: DecodedCard, explain: bool = False) -> str:
    """Format one decoded card as a two-column table."""
    lines = [
        f"\nBarcode: {card.barcode}",
        "-" * 60,
        f"{'Field':<16} {'Value':<20}",
        "-" * 60,
    ]
    for key, value in card.to_flat_dict().items():
        if isinstance(value, bool):
            value = "yes" if value else "no"
        lines.append(f"{key:<16} {value!s:<20}")
    if card.race_name:
        lines.append(f"{'race_name':<16} {card.race_name:<20}")

    if explain and card.digit_mappings:
        lines.append("-" * 60)
        lines.append(f"{'Field':<16} {'Digits':<12} {'Rule':<30}")
        lines.append("-" * 60)
        for field, mapping in card.digit_mappings.items():
            digits = ",".join(str(i) for i in mapping.source_indices) or "-"
            lines.append(f"{field:<16} {digits:<12} {mapping.explanation_kind.value:<30}")

    lines.append("-" * 60)
    return "\n".join(lines)


def format_json(cards: list[DecodedCard]) -> str:
    """Format decoded cards as a JSON array."""
    return json.dumps([card.to_dict() for card in cards], indent=2)


@click.command()
@click.argument("barcodes", nargs=-1, required=True)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default=None,
    help="Output format (default: OUTPUT_FORMAT setting, else table)",
)
@click.option(
    "--explain",
    is_flag=True,
    help="Show which barcode digits produced each field (table format only)",
)
def main(barcodes: tuple[str, ...], output_format: str | None, explain: bool) -> None:
    """Decode one or more barcodes into game cards."""
    settings = get_settings()
    configure_logging(settings)
    output_format = output_format or settings.output_format

    cards = [decode_barcode(barcode) for barcode in barcodes]

    if output_format == "json":
        click.echo(format_json(cards))
    else:
        for card in cards:
            click.echo(format_table(card, explain=explain))

    invalid = [card for card in cards if not card.is_valid]
    if invalid:
        click.echo(f"{len(invalid)} of {len(cards)} barcode(s) could not be decoded", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
