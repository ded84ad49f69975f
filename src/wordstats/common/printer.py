import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wordstats.stats.models import AnalysisResult

INVALID_DIRECTORY_MESSAGE = "Invalid directory or directory not selected."


def format_text_report(result: AnalysisResult) -> str:
    """按逐文件 + 汇总的顺序生成纯文本报告"""
    lines = ["Word Statistics:"]
    for file_name, stats in result.per_file.items():
        lines.extend([
            file_name,
            f"Word count: {stats.word_count}",
            f"Is count: {stats.is_count}",
            f"Are count: {stats.are_count}",
            f"You count: {stats.you_count}",
            f"Longest word: {stats.longest_word}",
            f"Shortest word: {stats.shortest_word}",
            "",
        ])

    lines.extend([
        "",
        "Overall Statistics:",
        f"Overall Longest Word: {result.overall_longest_word}",
        f"Overall Shortest Word: {result.overall_shortest_word}",
    ])
    return "\n".join(lines)


class Printer:
    def __init__(self, console: Optional[Console] = None):
        if console is None:
            self.console = Console()
        else:
            self.console = console

    def print_str_in_terminal(self, content: str, style: str = None):
        if style:
            self.console.print(content, style=style)
        else:
            self.console.print(content)

    def print_text_report(self, result: AnalysisResult):
        # markup/highlight 关闭，保证原样输出
        self.console.print(format_text_report(result), markup=False, highlight=False, emoji=False, soft_wrap=True)

    def print_json_report(self, result: AnalysisResult):
        self.console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))

    def print_table_report(self, result: AnalysisResult):
        table = Table(title="Word Statistics", show_header=True, header_style="bold magenta")
        table.add_column("File", style="cyan")
        table.add_column("Words", justify="right", style="green")
        table.add_column("is", justify="right")
        table.add_column("are", justify="right")
        table.add_column("you", justify="right")
        table.add_column("Longest word")
        table.add_column("Shortest word")

        for file_name, stats in result.per_file.items():
            table.add_row(
                file_name,
                str(stats.word_count),
                str(stats.is_count),
                str(stats.are_count),
                str(stats.you_count),
                Text(stats.longest_word),
                Text(stats.shortest_word),
            )
        self.console.print(table)

        overall = Text.assemble(
            ("Overall Longest Word: ", "bold"), result.overall_longest_word, "\n",
            ("Overall Shortest Word: ", "bold"), result.overall_shortest_word,
        )
        self.console.print(Panel(overall, title="Overall Statistics", border_style="blue"))

    def print_report(self, result: AnalysisResult, output_format: str = "text"):
        if output_format == "json":
            self.print_json_report(result)
        elif output_format == "table":
            self.print_table_report(result)
        else:
            self.print_text_report(result)

    def print_errors(self, result: AnalysisResult):
        for error in result.errors:
            self.console.print(Text(f"Skipped: {error}", style="yellow"))
