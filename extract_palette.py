#!/usr/bin/env python3
"""
Extract a small color palette from an image with k-means.

Pipeline: Sample → Cluster → Order → Render
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import kmeans
from palette import order
from render import render_html, render_terminal
from sampling import DEFAULT_GRID, sample_grid


# =============================================================================
# Constants
# =============================================================================

DEFAULT_COLORS = 5
DEFAULT_ITERATIONS = 10


# =============================================================================
# Main Pipeline
# =============================================================================

def extract_palette(image_path: str, k: int = DEFAULT_COLORS,
                    iterations: int = DEFAULT_ITERATIONS,
                    grid: int = DEFAULT_GRID) -> list[kmeans.Centroid]:
    """Sample, cluster and order the palette of one image.

    Raises:
        FileNotFoundError: If the image does not exist
        ValueError: If the image cannot be read or the parameters are invalid
    """
    samples = sample_grid(image_path, grid=grid)
    centroids = kmeans.run(samples, k, iterations)
    return order(centroids)


def default_output_path(image_path: Path) -> Path:
    return image_path.with_name(f"{image_path.stem}-palette.html")


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract a representative color palette from an image.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to the image file'
    )
    parser.add_argument(
        '--colors', '-k',
        type=int,
        default=DEFAULT_COLORS,
        help=f'Number of palette colors (default {DEFAULT_COLORS})'
    )
    parser.add_argument(
        '--iterations', '-n',
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f'Number of k-means iterations (default {DEFAULT_ITERATIONS})'
    )
    parser.add_argument(
        '--grid', '-g',
        type=int,
        default=DEFAULT_GRID,
        help=f'Downsample to a GRID x GRID sample grid (default {DEFAULT_GRID})'
    )
    parser.add_argument(
        '--no-ansi',
        action='store_true',
        help='Print hex values only, without terminal color swatches'
    )
    parser.add_argument(
        '--output', '-o',
        nargs='?',
        const=True,
        default=None,
        help='Write HTML report. Optionally specify path, otherwise auto-names from input.'
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    image_path = Path(args.input)

    try:
        palette = extract_palette(str(image_path), k=args.colors,
                                  iterations=args.iterations, grid=args.grid)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading image: {e}", file=sys.stderr)
        return 1

    print(render_terminal(palette, ansi=not args.no_ansi))

    if args.output:
        if args.output is True:
            output_path = default_output_path(image_path)
        else:
            output_path = Path(args.output)

        html = render_html(palette, str(image_path), args.colors, args.iterations)
        try:
            output_path.write_text(html)
            print(f"\nWrote: {output_path}")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
