"""Command-line interface for generating text from a corpus file."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from markovgen.config import MarkovConfig
from markovgen.models.markov import MarkovError


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def generate(args) -> int:
    """Feed the model from the corpus file and print generated text."""
    config = MarkovConfig(
        length=args.length,
        seed=args.seed,
        cache_capacity=args.cache_capacity,
    )
    markov = config.build()

    try:
        markov.feed_from_file(args.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    try:
        text = markov.generate(config.length)
    except MarkovError as e:
        logger.error(str(e))
        return 1

    print(text)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Generate text from a trigram Markov chain'
    )
    parser.add_argument(
        'path',
        type=Path,
        help='Corpus text file'
    )
    parser.add_argument('--length', type=int, default=30,
                        help='Maximum number of words to generate')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--cache-capacity', type=int,
                        help='Bound the number of stored word pairs')
    parser.add_argument('--verbose', action='store_true',
                        help='Log debug output')

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.cache_capacity is not None and args.cache_capacity < 1:
        parser.error('--cache-capacity must be positive')
    if args.length < 0:
        parser.error('--length must not be negative')

    return generate(args)


if __name__ == '__main__':
    sys.exit(main())
