"""Image generation utilities for a11ykit."""

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from . import wcag


def _rgb(key: str) -> tuple[float, float, float]:
    return tuple(int(key[i : i + 2], 16) / 255.0 for i in (0, 2, 4))  # type: ignore[return-value]


def create_matrix_png(
    table: dict[str, dict[str, str]],
    output_file: str,
    tile_size: int = 48,
    tile_margin: int = 2,
    level: float = wcag.CONTRAST["AA"]["normal"],
) -> None:
    """Create a PNG image of a contrast matrix.

    Each cell shows the row color as text on the column color, labelled with
    the contrast ratio. Cells below ``level`` get a red outline.
    """
    keys = list(table)
    n_colors = len(keys)
    if n_colors == 0:
        raise ValueError("No colors provided")

    # Header row and column hold the color swatches
    cells = n_colors + 1
    size = (cells * (tile_size + tile_margin)) + tile_margin

    fig, ax = plt.subplots(figsize=(size / 100, size / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor("white")
    ax.set_facecolor("white")

    ax.set_xlim(0, size)
    ax.set_ylim(0, size)
    ax.axis("off")

    def origin(row: int, col: int) -> tuple[int, int]:
        x = tile_margin + col * (tile_size + tile_margin)
        y = size - (row + 1) * (tile_size + tile_margin)
        return x, y

    for i, key in enumerate(keys):
        for position in (origin(0, i + 1), origin(i + 1, 0)):
            ax.add_patch(
                patches.Rectangle(position, tile_size, tile_size, linewidth=0, facecolor=_rgb(key))
            )

    font_size = max(4, tile_size // 6)
    for row, foreground in enumerate(keys, start=1):
        for col, background in enumerate(keys, start=1):
            ratio = table[foreground][background]
            x, y = origin(row, col)
            passes = float(ratio) >= level
            ax.add_patch(
                patches.Rectangle(
                    (x, y),
                    tile_size,
                    tile_size,
                    linewidth=0 if passes else 1.5,
                    edgecolor="red",
                    facecolor=_rgb(background),
                )
            )
            ax.text(
                x + tile_size / 2,
                y + tile_size / 2,
                ratio,
                color=_rgb(foreground),
                fontsize=font_size,
                ha="center",
                va="center",
            )

    # Save the image
    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG matrix saved to: {output_file}")
