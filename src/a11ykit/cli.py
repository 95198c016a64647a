"""Command-line interface for a11ykit."""

import json
import logging
import sys
from typing import NoReturn

import click

from . import __version__, wcag
from .apca import APCA
from .color import Color
from .color_utils import parse_color
from .image_generation import create_matrix_png
from .luminance import Luminance
from .matrix import luminance_matrix
from .readability import LANGUAGES, Readability

logger = logging.getLogger(__name__)

LEVEL_CHOICE = click.Choice(list(wcag.LEVELS), case_sensitive=False)
SIZE_CHOICE = click.Choice(list(wcag.SIZES), case_sensitive=False)


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _parse_pair(foreground: str, background: str) -> tuple[Color, Color]:
    return parse_color(foreground), parse_color(background)


@click.group(context_settings={"auto_envvar_prefix": "A11YKIT"})
@click.version_option(version=__version__, prog_name="a11ykit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool) -> None:
    """Evaluate color contrast and readability for accessibility.

    Colors can be given as #RGB, #RRGGBB, #RRGGBBAA, rgb(R,G,B),
    rgba(R,G,B,A), hsl(H,S%,L%) or hsla(H,S%,L%,A).

    Examples:

        a11ykit contrast "#777" "#fff"

        a11ykit search "#bbb" "#ccc" --level AAA --isolate foreground

        a11ykit apca "rgb(0, 0, 0)" "#fff" -F json

        a11ykit matrix "#000, #fff, #f00" -F png -o matrix.png

        a11ykit readability "Drink this medicine, please. Thank you." --lang en
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("foreground")
@click.argument("background")
@click.option("-l", "--level", type=LEVEL_CHOICE, default="AA", help="WCAG level (default: AA)")
@click.option(
    "-s", "--size", type=SIZE_CHOICE, default="normal", help="Text size (default: normal)"
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def contrast(foreground: str, background: str, level: str, size: str, output_format: str) -> None:
    """Show the WCAG contrast ratio of FOREGROUND text on BACKGROUND."""
    try:
        pair = Luminance(*_parse_pair(foreground, background))
        threshold = wcag.threshold(level, size)
        passes = pair.test(threshold)

        if output_format == "json":
            click.echo(
                json.dumps(
                    {
                        "foreground": pair.foreground.hcolor,
                        "background": pair.background.hcolor,
                        "contrast": pair.contrast,
                        "level": level.upper(),
                        "size": size.lower(),
                        "threshold": threshold,
                        "pass": passes,
                    },
                    indent=2,
                )
            )
        else:
            verdict = "pass" if passes else "fail"
            click.echo(
                f"{pair.foreground.hcolor} on {pair.background.hcolor}: "
                f"{pair.contrast:.2f}:1 ({level.upper()} {size.lower()} {threshold}:1 {verdict})"
            )
    except ValueError as e:
        _fail(str(e))


@main.command()
@click.argument("foreground")
@click.argument("background")
@click.option(
    "-r",
    "--ratio",
    type=click.FloatRange(1.0, 21.0),
    help="Target contrast ratio; overrides --level and --size",
)
@click.option("-l", "--level", type=LEVEL_CHOICE, default="AA", help="WCAG level (default: AA)")
@click.option(
    "-s", "--size", type=SIZE_CHOICE, default="normal", help="Text size (default: normal)"
)
@click.option(
    "-i",
    "--isolate",
    type=click.Choice(["none", "foreground", "background"], case_sensitive=False),
    default="none",
    help="Only adjust this color (default: none, adjust both)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def search(
    foreground: str,
    background: str,
    ratio: float | None,
    level: str,
    size: str,
    isolate: str,
    output_format: str,
) -> None:
    """Adjust FOREGROUND and BACKGROUND until their contrast passes."""
    try:
        pair = Luminance(*_parse_pair(foreground, background))
        target = ratio if ratio is not None else wcag.threshold(level, size)
        before = pair.contrast
        pair.search(target, None if isolate == "none" else isolate.lower())
        passes = pair.test(target)

        if output_format == "json":
            click.echo(
                json.dumps(
                    {
                        "foreground": pair.foreground.hcolor,
                        "background": pair.background.hcolor,
                        "contrast": pair.contrast,
                        "initial_contrast": before,
                        "target": target,
                        "pass": passes,
                    },
                    indent=2,
                )
            )
        else:
            click.echo(f"foreground: {pair.foreground.hcolor}")
            click.echo(f"background: {pair.background.hcolor}")
            click.echo(f"contrast:   {before:.2f}:1 -> {pair.contrast:.2f}:1 (target {target}:1)")
            if not passes:
                click.echo(f"No passing pair found for {target}:1", err=True)
                sys.exit(1)
    except ValueError as e:
        _fail(str(e))


@main.command()
@click.argument("foreground")
@click.argument("background")
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def apca(foreground: str, background: str, output_format: str) -> None:
    """Show the APCA lightness contrast (Lc) of FOREGROUND text on BACKGROUND."""
    try:
        evaluator = APCA(*_parse_pair(foreground, background))
        score = evaluator.score()

        if output_format == "json":
            report = {
                size: {str(weight): ok for weight, ok in weights.items()}
                for size, weights in evaluator.font_report().items()
            }
            click.echo(
                json.dumps(
                    {
                        "foreground": evaluator.foreground.hcolor,
                        "background": evaluator.background.hcolor,
                        "score": score,
                        "fonts": report,
                    },
                    indent=2,
                )
            )
            return

        click.echo(
            f"{evaluator.foreground.hcolor} on {evaluator.background.hcolor}: Lc {score}"
        )
        click.echo()
        marks = {True: "ok", False: "-", None: ""}
        click.echo("  size  " + "".join(f"{weight:>5}" for weight in range(100, 1000, 100)))
        for size, weights in evaluator.font_report().items():
            click.echo(f"  {size:6}" + "".join(f"{marks[ok]:>5}" for ok in weights.values()))
    except ValueError as e:
        _fail(str(e))


@main.command()
@click.argument("colors", nargs=-1, required=True)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json", "png"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-o", "--output", type=str, help="Output file path (required for PNG format)"
)
@click.option(
    "--tile-size",
    type=click.IntRange(16, 128),
    default=48,
    help="Size of square tiles in pixels for PNG format (default: 48)",
)
def matrix(colors: tuple[str, ...], output_format: str, output: str | None, tile_size: int) -> None:
    """Show the contrast of every pair of COLORS.

    COLORS may be separate arguments or comma separated lists.
    """
    try:
        palette = [parse_color(part) for arg in colors for part in arg.split(",") if part.strip()]
        logger.debug("Building matrix for %d colors", len(palette))
        table = luminance_matrix(palette)

        if output_format == "json":
            click.echo(json.dumps(table, indent=2))
        elif output_format == "png":
            if not output:
                _fail("PNG output requires -o/--output filename")

            try:
                create_matrix_png(table, output, tile_size)
            except (OSError, ValueError) as e:
                _fail(f"creating PNG: {e}")
        else:  # grid format
            keys = list(table)
            click.echo("  " + " " * 8 + "".join(f"{key:>10}" for key in keys))
            for key in keys:
                click.echo(f"  {key:8}" + "".join(f"{table[key][other]:>10}" for other in keys))
    except ValueError as e:
        _fail(str(e))


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option(
    "--lang",
    type=click.Choice(sorted(LANGUAGES), case_sensitive=False),
    help="Language of the text, sets the long word length",
)
@click.option(
    "--size", type=click.IntRange(1, 50), help="Long word length (default: 6)"
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def readability(text: tuple[str, ...], lang: str | None, size: int | None, output_format: str) -> None:
    """Score each TEXT phrase with LIX and OVIX."""
    scorer = Readability(list(text), size, lang)

    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "lang": scorer.lang,
                    "wlong": scorer.wlong,
                    "LIX": scorer.LIX,
                    "OVIX": scorer.OVIX,
                    "items": [item._asdict() for item in scorer.parsed],
                    "error": str(scorer.error) if scorer.error else None,
                },
                indent=2,
            )
        )
        return

    for item in scorer.parsed:
        click.echo(f"LIX {item.lix:3}  OVIX {item.ovix:6.2f}  {item.phrase}")
    click.echo(f"Average LIX {scorer.LIX}, OVIX {scorer.OVIX} (long words > {scorer.wlong} characters)")
    if scorer.error:
        click.echo(f"Warning: {scorer.error}", err=True)


if __name__ == "__main__":
    main()
