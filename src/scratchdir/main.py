from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import os
import subprocess
import typer
from .config import Settings
from .errors import CleanupFailed, TempDirError
from .logging_setup import get_logger
from .services.temp_utils import TemporaryDirectory

app = typer.Typer(help="Create uniquely named scratch directories.")

def _load(config: Path) -> Settings:
    settings = Settings.from_file(config)
    get_logger(logfile=settings.log_file, level=str(settings.get("log_level", "INFO")))
    return settings

def _open(settings: Settings, base: Optional[Path], prefix: Optional[str]) -> TemporaryDirectory:
    try:
        return TemporaryDirectory(
            base or settings.base_dir,
            settings.get("prefix", "") if prefix is None else prefix,
            policy=settings.as_policy(),
        )
    except (TempDirError, ValueError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)

@app.command()
def new(
base: Optional[Path] = typer.Option(None, file_okay=False, help="Parent directory (default: system temp)."),
prefix: Optional[str] = typer.Option(None, help="Name prefix."),
config: Path = typer.Option(Path("scratchdir.yaml"), exists=False),
):
    """Create a directory and keep it; prints its path."""
    settings = _load(config)
    handle = _open(settings, base, prefix)
    typer.echo(handle.into_path())

@app.command()
def run(
command: List[str] = typer.Argument(..., help="Command to run inside the directory."),
base: Optional[Path] = typer.Option(None, file_okay=False, help="Parent directory (default: system temp)."),
prefix: Optional[str] = typer.Option(None, help="Name prefix."),
keep: bool = typer.Option(False, help="Keep the directory after the command exits."),
config: Path = typer.Option(Path("scratchdir.yaml"), exists=False),
):
    """Run COMMAND with a fresh directory as working directory, then remove it."""
    settings = _load(config)
    logger = get_logger()
    handle = _open(settings, base, prefix)
    env = {**os.environ, "SCRATCHDIR": handle.name}
    code = 1
    try:
        result = subprocess.run(command, cwd=handle.path, env=env, check=False)
        code = result.returncode
    except OSError as exc:
        logger.error("Could not run %s: %s", command[0], exc)
        code = 127
    finally:
        if keep:
            typer.echo(handle.into_path())
        else:
            try:
                handle.close()
            except CleanupFailed as exc:
                logger.error("%s", exc)
                if code == 0:
                    code = 1
    raise typer.Exit(code=code)

if __name__ == "__main__":
    app()
