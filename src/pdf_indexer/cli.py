from __future__ import annotations

import logging
from typing import Optional

import typer

from pdf_indexer.bootstrap import App, build_app
from pdf_indexer.chat import create_chat
from pdf_indexer.config import load_settings
from pdf_indexer.errors import ConfigurationError
from pdf_indexer.logging_utils import setup_logging
from pdf_indexer.prompts import DEFAULT_ASK
from pdf_indexer.scheduler import build_scheduler

__version__ = "0.1.0"

app = typer.Typer(add_completion=False, help="Scheduled PDF -> embeddings -> Pinecone indexer")


def _startup() -> App:
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        return build_app(settings)
    except ConfigurationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def health() -> None:
    """Health check to verify config + logging works."""
    application = _startup()
    s = application.settings
    log = logging.getLogger("pdf_indexer.health")

    log.info("Health check OK.")
    log.info("Embedding model: %s", s.openai_embedding_model)
    log.info("Completion model: %s", s.openai_model)
    log.info("Pinecone index: %s", s.pinecone_index_name)
    log.info("Docs dir: %s", s.docs_dir)
    log.info("Schedule: %s", s.ingest_cron)

    typer.echo("OK")


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(f"pdf-indexer {__version__}")


@app.command()
def run() -> None:
    """
    Run one ingestion pass now, outside the schedule.
    """
    application = _startup()
    summary = application.orchestrator.run()
    typer.echo(summary.model_dump_json())


@app.command()
def serve(
    cron: Optional[str] = typer.Option(None, "--cron", help="Crontab expression (default: INGEST_CRON)"),
) -> None:
    """
    Load existing records, then run ingestion on a schedule until interrupted.
    """
    application = _startup()
    application.orchestrator.seed_records()

    scheduler = build_scheduler(application.orchestrator, cron or application.settings.ingest_cron)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger("pdf_indexer.serve").info("Scheduler stopped.")


@app.command()
def ask(
    question: str = typer.Argument(DEFAULT_ASK, help="Question to ask about the stored context"),
) -> None:
    """
    Ask the completion model about the first stored record.
    """
    application = _startup()
    records = application.orchestrator.seed_records()
    answer = create_chat(application.llm, records, ask=question)

    if answer is None:
        typer.secho("No answer.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)
    typer.echo(answer)


if __name__ == "__main__":
    app()
