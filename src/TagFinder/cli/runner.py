"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from TagFinder.cli.commands import SearchCommand, TagsCommand
from TagFinder.config import AppConfig
from TagFinder.core.models import Corpus
from TagFinder.core.query import TagQuery
from TagFinder.renderers import create_output_writer, render_info
from TagFinder.services import EmptyQueryError, create_search_service, describe_image, parse_request, validate_query
from TagFinder.storage import (
    create_corpus,
    create_tag_dictionary,
    create_title_map,
    load_cg_list,
    load_entry,
)
from TagFinder.storage.tags import TagDictionary
from TagFinder.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Query and argument errors surface as `click.ClickException`; any other
    failure is logged and turned into `click.Abort`.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def _parse_queries(self, raw_queries: Sequence[str]) -> list[TagQuery]:
        if not raw_queries:
            if not self.config.search.queries:
                raise click.UsageError("No query given and no queries configured")
            return list(self.config.search.queries)
        try:
            return [parse_request(raw) for raw in raw_queries]
        except EmptyQueryError as e:
            raise click.ClickException(str(e)) from e

    def _require_dictionary(self) -> TagDictionary:
        dictionary = create_tag_dictionary(self.config)
        if dictionary is None:
            raise click.ClickException("corpus.tag_file is not configured")
        return dictionary

    def run_search(
        self,
        action: str,
        raw_queries: Sequence[str] = (),
        *,
        page: int = 1,
        max_results: int | None = None,
    ) -> None:
        """Load the corpus and run the given (or configured) queries.

        Args:
            action: The CLI command name (e.g., 'search').
            raw_queries: Query strings from the command line.
            page: Page of results shown on the console.
            max_results: Override of ``search.max_results``.

        Raises:
            click.ClickException: When a query is empty.
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        queries = self._parse_queries(raw_queries)
        try:
            corpus = create_corpus(self.config)
            dictionary = create_tag_dictionary(self.config)
            output_writer = create_output_writer(self.config, page=page)

            command = SearchCommand(
                search_service=create_search_service(self.config, corpus),
                queries=queries,
                output_writer=output_writer,
                dictionary=dictionary,
                max_results=max_results,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_tags(self, action: str, keyword: str, *, limit: int | None = None) -> None:
        """List known tags containing ``keyword``.

        Raises:
            click.ClickException: When no tag file is configured.
            click.Abort: When the tag file cannot be loaded.
        """
        self._configure_logging(action)
        try:
            dictionary = self._require_dictionary()
            TagsCommand(dictionary=dictionary, keyword=keyword, limit=limit).execute()
        except click.ClickException:
            raise
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Tag listing failed: %s", e)
            raise click.Abort from e

    def run_validate(self, action: str, raw_query: str) -> None:
        """Check that every tag of a query is a known tag.

        Raises:
            click.ClickException: When the query is empty or has unknown tags.
            click.Abort: When the tag file cannot be loaded.
        """
        self._configure_logging(action)
        query = self._parse_queries([raw_query])[0]
        try:
            dictionary = self._require_dictionary()
        except click.ClickException:
            raise
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Validation failed: %s", e)
            raise click.Abort from e

        invalid = validate_query(query, dictionary)
        if invalid:
            raise click.ClickException("Invalid tags: " + " ".join(invalid))
        log.info("OK")

    def run_info(self, action: str, image_id: str) -> None:
        """Show the tags of one image, with translations and work title.

        Raises:
            click.ClickException: When the image has no tag file.
            click.Abort: When the tag file or CG list cannot be loaded.
        """
        self._configure_logging(action)
        entry = load_entry(image_id, Path(self.config.corpus.tag_dir))
        if entry is None:
            raise click.ClickException(f"Description for this image not found: {image_id}")

        try:
            dictionary = create_tag_dictionary(self.config)
            rows = load_cg_list(Path(self.config.corpus.cg_list)) if self.config.corpus.cg_list else None
            titles = create_title_map(self.config, rows)
            info = describe_image(image_id, Corpus(entries=(entry,)), dictionary=dictionary, titles=titles)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Loading image details failed: %s", e)
            raise click.Abort from e

        for line in render_info(info).splitlines():
            log.info(line)
