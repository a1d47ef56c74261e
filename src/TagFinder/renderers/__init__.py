"""Output renderers for command results.

Exports the OutputWriter base for new output formats and a factory that
instantiates writers from configuration.
"""

from __future__ import annotations

from TagFinder.config import AppConfig
from TagFinder.renderers.base import MultiOutputWriter, OutputWriter
from TagFinder.renderers.console import ConsoleOutputWriter, paginate, render_info, render_text
from TagFinder.renderers.json import JsonFileWriter, render_json, render_query


def create_output_writer(config: AppConfig, *, page: int = 1) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.
        page: Page of results shown on the console.

    Returns:
        Writer delegating to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter(page=page, page_size=config.search.page_size))
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "create_output_writer",
    "paginate",
    "render_info",
    "render_json",
    "render_query",
    "render_text",
]
