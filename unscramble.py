"""Restore (or produce) a seeded tile-scrambled image."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from tileshuffle.canvas import encode_image, load_image
from tileshuffle.errors import ConfigurationError
from tileshuffle.numeric import to_int
from tileshuffle.reassembler import DEFAULT_SEED, ImageReassembler, ReassemblerConfig
from tileshuffle.splitter import DEFAULT_TILE_SIZE


def parse_positive_int(value: str) -> int:
    """Parse a strictly positive integer, accepting 0b/0o/0x prefixes."""
    try:
        number = to_int(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("value must be positive")
    return number


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Unscramble a seeded tile-shuffled image.")
    parser.add_argument("--image", required=True, help="Path or http(s) URL of the input image")
    parser.add_argument(
        "--output",
        default=None,
        help="Optional output path for the result (default: do not save)",
    )
    parser.add_argument(
        "--tile-size",
        type=parse_positive_int,
        default=DEFAULT_TILE_SIZE,
        help=f"Tile side length in pixels (default: {DEFAULT_TILE_SIZE})",
    )
    parser.add_argument("--seed", default=DEFAULT_SEED, help=f"Shuffle seed (default: {DEFAULT_SEED!r})")
    parser.add_argument(
        "--workers",
        type=parse_positive_int,
        default=1,
        help="Threads used to process tile groups (default: 1)",
    )
    parser.add_argument(
        "--scramble",
        action="store_true",
        help="Apply the forward scramble instead of undoing it",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display input and output images",
    )
    return parser.parse_args()


def main() -> None:
    """Load an image, rearrange its tiles and optionally save/show the result."""
    args = parse_args()
    output_path = Path(args.output) if args.output else None

    image = load_image(args.image)
    reassembler = ImageReassembler(
        ReassemblerConfig(tile_size=args.tile_size, seed=args.seed, workers=args.workers)
    )

    start = time.perf_counter()
    result = reassembler.scramble(image) if args.scramble else reassembler.unscramble(image)
    duration = time.perf_counter() - start

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fmt = output_path.suffix.lstrip(".").lower() or "png"
        output_path.write_bytes(encode_image(result, fmt))

    groups = reassembler.partitioner.group(image.shape[1], image.shape[0])
    print(f"Input image: {args.image}")
    print(f"Size: {image.shape[1]}x{image.shape[0]}")
    print(f"Tile size: {args.tile_size}, seed: {args.seed!r}")
    print(f"Tile groups: {', '.join(f'{key} x{len(tiles)}' for key, tiles in groups.items())}")
    print(f"Mode: {'scramble' if args.scramble else 'unscramble'} in {duration:.4f}s")
    if output_path is not None:
        print(f"Output image: {output_path.resolve()}")
    else:
        print("Output image: not saved (no --output specified)")

    if not args.no_show:
        import matplotlib.pyplot as plt

        fig, axes = plt.subplots(1, 2, figsize=(10, 5))
        axes[0].imshow(image)
        axes[0].set_title("Input")
        axes[1].imshow(result)
        axes[1].set_title("Scrambled" if args.scramble else "Unscrambled")
        for ax in axes:
            ax.axis("off")
        plt.tight_layout()
        plt.show()


if __name__ == "__main__":
    main()
