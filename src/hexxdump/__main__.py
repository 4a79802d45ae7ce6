"""CLI entry point for hexxdump."""

import logging
import sys

import click

from hexxdump.config import Config


def _single_char(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if len(value) != 1:
        raise click.BadParameter(f"must be a single character, got {value!r}")
    return value


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--bytes-per-row", "-w", "bytes_per_row", type=click.IntRange(min=0), default=16, help="Bytes per row (0 for a single row)")
@click.option("--address-width", "-a", "address_width", type=click.IntRange(min=0), default=4, help="Minimum hex digits in the address column")
@click.option("--no-address", "no_address", is_flag=True, help="Hide the address column")
@click.option("--no-hex", "no_hex", is_flag=True, help="Hide the hex values column")
@click.option("--no-characters", "no_characters", is_flag=True, help="Hide the characters column")
@click.option("--control-pictures", "-c", "control_pictures", is_flag=True, help="Show control bytes as Unicode control pictures")
@click.option("--space-picture", "space_picture", is_flag=True, help="Show the space byte as ␠")
@click.option("--substitute", "-s", "substitute", type=str, default=".", callback=_single_char, help="Character for unprintable bytes")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug details to stderr")
def main(
    input: str | None,
    bytes_per_row: int,
    address_width: int,
    no_address: bool,
    no_hex: bool,
    no_characters: bool,
    control_pictures: bool,
    space_picture: bool,
    substitute: str,
    output: str | None,
    verbose: bool,
) -> None:
    """Hex dump of a file, or of stdin when no INPUT is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input, "rb") as f:
                data = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        data = sys.stdin.buffer.read()

    dumper = (
        Config.new()
        .with_bytes_per_row(bytes_per_row)
        .with_address_width(address_width)
        .with_show_address(not no_address)
        .with_show_hex_values(not no_hex)
        .with_show_characters(not no_characters)
        .with_control_pictures(control_pictures)
        .with_control_picture_for_space(space_picture)
        .with_substitute_character(substitute)
        .into_hexxdump()
    )

    if output:
        try:
            with open(output, "wb") as f:
                dumper.hexdump_to(f, data)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(dumper.get_hexdump(data), nl=False)


if __name__ == "__main__":
    main()
