# filename: huffman_cli.py

import argparse
import logging
import os
import sys
from datetime import datetime

from huffman_config import load_config
from huffman_errors import HuffmanError
from huffman_service import HuffmanService, read_file

logger = logging.getLogger("huffpack")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level="INFO", log_dir=None):
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            handlers.append(logging.FileHandler(os.path.join(log_dir, f"run_{timestamp}.log")))
        if isinstance(level, str):
            level = level.upper()
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logger


def build_parser():
    parser = argparse.ArgumentParser(prog="huffpack", description="Huffman file compressor")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("compress", "Compress SRC into an artifact"),
                            ("decompress", "Restore SRC artifact into raw bytes")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("src")
        cmd.add_argument("-o", "--output", default=None, help="Destination path")

    check = sub.add_parser("roundtrip", help="Compress and decompress SRC in memory and compare")
    check.add_argument("src")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.log_level, config.log_dir)
    except (OSError, ValueError) as exc:
        print(f"huffpack: bad config: {exc}", file=sys.stderr)
        return 1

    service = HuffmanService()
    try:
        if args.command == "compress":
            service.compress_file(args.src, args.output or config.compressed_path(args.src))
        elif args.command == "decompress":
            service.decompress_file(args.src, args.output or config.decompressed_path(args.src))
        else:
            data = read_file(args.src)
            restored = service.decompress_bytes(service.compress_bytes(data))
            stats = service.stats(data)
            logger.info("roundtrip %s: %d -> %d bytes, match=%s",
                        args.src, stats["original_size"], stats["compressed_size"],
                        restored == data)
            if restored != data:
                return 1
    except HuffmanError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
