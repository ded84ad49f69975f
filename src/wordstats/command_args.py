import argparse
from typing import List, Optional, Tuple

from wordstats.common import WordStatsArgs


def parse_args(input_args: Optional[List[str]] = None) -> Tuple[WordStatsArgs, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        description="Word statistics for the text files of a directory")

    parser.add_argument("--source_dir", default=".",
                        help="Directory to analyze")
    parser.add_argument("--no_subdirectories", action="store_true",
                        help="Only analyze files directly inside source_dir (any extension); "
                             "by default all .txt files of the tree are analyzed")
    parser.add_argument("--output_format", default="text",
                        choices=["text", "table", "json"],
                        help="How to render the report")
    parser.add_argument("--file", default=None,
                        help="YAML config file, its keys override command line arguments")
    parser.add_argument("--log_level", default="WARNING",
                        help="Log level of the stderr sink")
    parser.add_argument("--log_file", default=None,
                        help="Also write logs to this file")

    raw_args = parser.parse_args(input_args)
    args = WordStatsArgs(
        source_dir=raw_args.source_dir,
        include_subdirectories=not raw_args.no_subdirectories,
        output_format=raw_args.output_format,
        log_level=raw_args.log_level,
        log_file=raw_args.log_file,
        file=raw_args.file,
    )
    return args, raw_args
