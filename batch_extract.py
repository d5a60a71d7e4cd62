#!/usr/bin/env python3
"""Batch extract palettes from a directory of images into HTML reports."""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from extract_palette import (
    DEFAULT_COLORS, DEFAULT_ITERATIONS, default_output_path, extract_palette,
)
from render import render_html, to_hex
from sampling import DEFAULT_GRID


IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif', '.bmp'}


def find_images(directory: Path) -> list[Path]:
    """Find all image files in directory."""
    return sorted(p for p in directory.iterdir()
                  if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Batch extract palettes and write HTML reports.'
    )
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Directory containing images'
    )
    parser.add_argument(
        '--output', '-o',
        required=True,
        help='Directory for HTML output files'
    )
    parser.add_argument('--colors', '-k', type=int, default=DEFAULT_COLORS,
                        help=f'Number of palette colors (default {DEFAULT_COLORS})')
    parser.add_argument('--iterations', '-n', type=int, default=DEFAULT_ITERATIONS,
                        help=f'Number of k-means iterations (default {DEFAULT_ITERATIONS})')
    parser.add_argument('--grid', '-g', type=int, default=DEFAULT_GRID,
                        help=f'Sample grid size per side (default {DEFAULT_GRID})')

    args = parser.parse_args(argv)

    input_dir = Path(args.input)
    output_dir = Path(args.output)

    if not input_dir.is_dir():
        print(f"Error: Input directory not found: {input_dir}", file=sys.stderr)
        return 2

    output_dir.mkdir(parents=True, exist_ok=True)

    images = find_images(input_dir)
    if not images:
        print(f"No images found in {input_dir}", file=sys.stderr)
        return 2

    total = len(images)
    succeeded = 0
    failed = []

    batch_start = time.perf_counter()

    for i, image_path in enumerate(images, 1):
        try:
            img_start = time.perf_counter()
            palette = extract_palette(str(image_path), k=args.colors,
                                      iterations=args.iterations, grid=args.grid)
            html = render_html(palette, str(image_path), args.colors, args.iterations)
            img_elapsed = time.perf_counter() - img_start

            output_file = output_dir / default_output_path(image_path).name
            if output_file.exists():
                print(f"  Warning: Overwriting {output_file.name}", file=sys.stderr)
            output_file.write_text(html)

            hexes = ' '.join(to_hex(c) for c in palette)
            print(f"[{i}/{total}] {image_path.name} → {hexes} ({img_elapsed:.2f}s)")
            succeeded += 1

        except (OSError, ValueError) as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"[{i}/{total}] {image_path.name} → ERROR: {error_msg}", file=sys.stderr)
            failed.append((image_path.name, error_msg))

    batch_elapsed = time.perf_counter() - batch_start

    # Summary
    print()
    print(f"Completed: {succeeded}/{total} succeeded in {batch_elapsed:.2f}s")
    if succeeded > 0:
        print(f"Average: {batch_elapsed / succeeded:.2f}s per image")
    if failed:
        print(f"Failed ({len(failed)}):")
        for name, error in failed:
            print(f"  - {name}: {error}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
