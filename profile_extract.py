#!/usr/bin/env python3
"""Profile extract_palette stages to find where the time goes."""

import cProfile
import io
import pstats
import sys
import time
from pathlib import Path

import kmeans
from batch_extract import find_images
from extract_palette import DEFAULT_COLORS, DEFAULT_ITERATIONS
from palette import order
from render import render_terminal
from sampling import sample_grid


def profile_image(image_path: str, k: int = DEFAULT_COLORS,
                  iterations: int = DEFAULT_ITERATIONS, verbose: bool = True):
    """Time each pipeline stage for a single image."""

    if verbose:
        print(f"\n{'='*60}")
        print(f"Profiling: {Path(image_path).name}")
        print(f"{'='*60}")

    timings = {}

    start = time.perf_counter()
    samples = sample_grid(image_path)
    timings['sample'] = time.perf_counter() - start

    if verbose:
        print(f"  Samples: {len(samples):,}")

    start = time.perf_counter()
    centroids = kmeans.run(samples, k, iterations)
    timings['cluster'] = time.perf_counter() - start

    start = time.perf_counter()
    palette = order(centroids)
    timings['order'] = time.perf_counter() - start

    start = time.perf_counter()
    render_terminal(palette)
    timings['render'] = time.perf_counter() - start

    total = sum(timings.values())
    timings['total'] = total

    if verbose:
        print(f"\nStage timings:")
        for stage, t in timings.items():
            pct = (t / total * 100) if stage != 'total' and total else 100
            print(f"  {stage:20s}: {t:6.3f}s ({pct:5.1f}%)")

    return timings, samples


def detailed_profile(image_path: str, k: int = DEFAULT_COLORS,
                     iterations: int = DEFAULT_ITERATIONS) -> str:
    """Run cProfile on kmeans.run (the main compute stage)."""
    samples = sample_grid(image_path)

    profiler = cProfile.Profile()
    profiler.enable()
    kmeans.run(samples, k, iterations)
    profiler.disable()

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream)
    stats.sort_stats('cumulative')
    stats.print_stats(20)

    return stream.getvalue()


def main():
    images_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "source_images"
    images = find_images(images_dir) if images_dir.is_dir() else []

    if not images:
        print(f"No images found in {images_dir}")
        sys.exit(1)

    print(f"Found {len(images)} images")

    all_timings = []
    for img in images:
        timings, samples = profile_image(str(img))
        all_timings.append((img.name, timings, len(samples)))

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"{'Image':<35} {'Samples':>10} {'Total':>10}")
    print("-" * 60)
    for name, timings, n in all_timings:
        print(f"{name:<35} {n:>10,} {timings['total']:>9.3f}s")

    print(f"\n{'='*60}")
    print("Detailed profile of kmeans.run()")
    print(f"{'='*60}")
    print(detailed_profile(str(images[0])))


if __name__ == "__main__":
    main()
