# src/vigil/cli/app.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from vigil.config.errors import ConfigError
from vigil.config.loader import load_config
from vigil.core.demo import build_subject, run_demo
from vigil.logging.log import init_logging


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(help="Vigil severity notification demo", add_completion=False)


@app.command()
def run(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML config"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging on stderr"),
):
    """
    Register the console-warning, file-error and console+file-fatal
    listeners, then send one warning, one error and one fatal notification.
    """
    try:
        cfg = load_config(config)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=2)

    try:
        log, run_id, _ = init_logging(base_dir=cfg.log_dir, verbose=verbose)
    except OSError as e:
        typer.echo(f"Config error: cannot create log dir {cfg.log_dir}: {e}", err=True)
        raise typer.Exit(code=2)

    subject = build_subject(cfg)
    run_demo(subject, cfg.messages)

    log.debug("run %s finished", run_id)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
