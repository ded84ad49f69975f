import sys
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

from wordstats.command_args import parse_args
from wordstats.common import WordStatsArgs
from wordstats.common.exceptions import TraversalError
from wordstats.common.printer import Printer, INVALID_DIRECTORY_MESSAGE
from wordstats.stats import DirectoryAggregator


def load_config(args: WordStatsArgs) -> WordStatsArgs:
    """用 --file 指定的 yaml 配置覆盖命令行参数"""
    if not args.file:
        return args

    with open(args.file, "r", encoding="utf-8") as f:
        config: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {args.file} must contain a mapping")

    merged = args.model_dump()
    for key, value in config.items():
        if key != "file":  # 排除 --file 参数本身
            merged[key] = value
    return WordStatsArgs(**merged)


def setup_logging(args: WordStatsArgs) -> None:
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    if args.log_file:
        logger.add(args.log_file, level="DEBUG", encoding="utf-8")


def main(input_args: Optional[List[str]] = None) -> int:
    args, _ = parse_args(input_args)
    args = load_config(args)
    setup_logging(args)

    printer = Printer()
    aggregator = DirectoryAggregator()

    try:
        result = aggregator.aggregate(args.source_dir, args.include_subdirectories)
    except TraversalError as e:
        logger.error(f"Directory scan failed: {e}")
        printer.print_str_in_terminal(INVALID_DIRECTORY_MESSAGE, style="red")
        return 1

    printer.print_report(result, args.output_format)
    # json 输出里已经带了 errors
    if args.output_format != "json":
        printer.print_errors(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
