"""Command line entry point: build a model from a corpus and print sentences."""

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from .config import SamplerConfig
from .errors import CapacityError, WordWalkError
from .factory import from_file
from .model import MarkovModel
from .parallel import generate_batch, list_parallel_modes
from .pattern import Delimiters, list_delimiters

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordwalk",
        description="Generate random sentences from a first-order word Markov model.",
    )
    parser.add_argument("corpus", nargs="?", help="Path to a plain-text corpus.")
    parser.add_argument(
        "--dataset",
        default=None,
        help="Hugging Face dataset to use instead of a file (needs the 'hub' extra).",
    )
    parser.add_argument("--split", default="train", help="Dataset split (default: train).")
    parser.add_argument("--column", default="text", help="Dataset text column (default: text).")
    parser.add_argument(
        "--num-docs", type=int, default=None, help="Number of dataset documents (default: all)."
    )
    parser.add_argument(
        "--marks",
        default="?!",
        help="Sentence-ending marks to generate, one sentence set per mark (default: '?!'). "
        "An empty string prints unconstrained walks.",
    )
    parser.add_argument("--count", type=int, default=1, help="Sentences per mark (default: 1).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--retries", type=int, default=None, help="Walks per sentence.")
    parser.add_argument("--max-chars", type=int, default=None, help="Maximum sentence length.")
    parser.add_argument(
        "--max-start-attempts",
        type=int,
        default=None,
        help="Random draws for a start token before scanning.",
    )
    parser.add_argument(
        "--strategy", choices=["uppercase", "any"], default=None, help="Start strategy."
    )
    parser.add_argument(
        "--delimiters",
        choices=list_delimiters(),
        default="default",
        help="Token delimiter set (default: space, CR, LF).",
    )
    parser.add_argument(
        "--max-capacity",
        type=int,
        default=None,
        help="Interning table size limit (default: unbounded).",
    )
    parser.add_argument("--workers", type=int, default=None, help="Sampling threads.")
    parser.add_argument(
        "--parallel-mode", choices=list_parallel_modes(), default="auto", help="Batch mode."
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress at INFO.")
    return parser


def _load_model(args: argparse.Namespace) -> MarkovModel:
    delimiters = Delimiters.get(args.delimiters)
    if args.dataset:
        # datasets is an optional, heavy dependency
        from .hub import from_dataset

        return from_dataset(
            args.dataset,
            split=args.split,
            column=args.column,
            num_docs=args.num_docs,
            delimiters=delimiters,
            max_capacity=args.max_capacity,
        )
    return from_file(
        args.corpus,
        delimiters=delimiters,
        max_capacity=args.max_capacity,
    )


def _generate(
    model: MarkovModel, cfg: SamplerConfig, args: argparse.Namespace
) -> list[str]:
    # one derived seed per mark so "?" and "!" batches differ under a fixed seed
    seeder = random.Random(cfg.seed)
    marks: list[str | None] = list(args.marks) or [None]
    sentences: list[str] = []
    for mark in marks:
        results = generate_batch(
            model,
            args.count,
            mark=mark,
            seed=seeder.getrandbits(64) if cfg.seed is not None else None,
            strategy=cfg.strategy,
            retries=cfg.retries,
            max_chars=cfg.max_chars,
            max_start_attempts=cfg.max_start_attempts,
            num_workers=args.workers,
            parallel_mode=args.parallel_mode,
        )
        for result in results:
            if result is None:
                log.warning("no sentence ending in %r after %d walks", mark, cfg.retries)
                continue
            sentences.append(result.text)
    return sentences


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.max_capacity is not None and args.max_capacity < 1:
        parser.error("--max-capacity must be positive")
    if args.count < 0:
        parser.error("--count must be >= 0")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.corpus and not args.dataset:
        parser.print_usage(sys.stderr)
        print("Error: give a corpus path or --dataset", file=sys.stderr)
        return 2

    try:
        cfg = SamplerConfig.from_env().merge(
            max_chars=args.max_chars,
            retries=args.retries,
            max_start_attempts=args.max_start_attempts,
            seed=args.seed,
            strategy=args.strategy,
        )
        model = _load_model(args)
        sentences = _generate(model, cfg, args)
    except CapacityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except WordWalkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130

    if sentences:
        print("\n\n".join(sentences))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
