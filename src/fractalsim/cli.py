"""
fractalsim.cli
==============
Typer‑based command‑line interface.

Examples
--------
    python -m fractalsim.cli --help
    python -m fractalsim.cli simulate --method fft --hurst 0.3 --n 1025
    python -m fractalsim.cli simulate --config run.yaml n_paths=50
    python -m fractalsim.cli plot fbm --path fbm.png
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import typer

from . import plotting
from .config import load_config, simulate
from .errors import NumericalError, PreconditionError, ValidationError
from .plotting import DEFAULT_OUTPUT_DIR

# ──────────────────────────────────────────────────────────────────────────────
# create Typer app; no Rich markup so help text prints safely in the
# Windows CP‑1252 console
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(add_completion=False, rich_markup_mode=None)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Simulate fractional Brownian motion and fractional Gaussian noise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ──────────────────────────────────────────────────────────────────────────────
# simulation
# ──────────────────────────────────────────────────────────────────────────────
@app.command("simulate", help="Generate FBM sample paths and write them as CSV.")
def simulate_cmd(
    overrides: List[str] = typer.Argument(
        None,
        help="Dotted override strings, e.g. hurst=0.3 n_paths=20",
    ),
    config: Optional[Path] = typer.Option(None, help="YAML file with simulation settings."),
    method: Optional[str] = typer.Option(None, help="'cholesky' or 'fft'."),
    hurst: Optional[float] = typer.Option(None, help="Hurst index in (0, 1)."),
    n: Optional[int] = typer.Option(None, help="Number of time points, including t=0."),
    horizon: Optional[float] = typer.Option(None, help="End time T of the grid."),
    paths: Optional[int] = typer.Option(None, help="Number of independent paths."),
    seed: Optional[int] = typer.Option(None, help="RNG seed for reproducibility."),
    output: Path = typer.Option(DEFAULT_OUTPUT_DIR / "fbm_paths.csv", help="CSV destination."),
) -> None:
    """Simulate paths and save them with one column per path."""

    options = {
        "method": method,
        "hurst": hurst,
        "n": n,
        "horizon": horizon,
        "n_paths": paths,
        "seed": seed,
    }
    dotted = [f"{k}={v}" for k, v in options.items() if v is not None]
    dotted.extend(overrides or [])

    try:
        cfg = load_config(config, dotted)
        result = simulate(cfg)
    except (ValidationError, PreconditionError, NumericalError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    t = np.linspace(0.0, cfg.horizon, cfg.n)[-result.shape[0]:]
    frame = pd.DataFrame(
        result,
        index=pd.Index(t, name="t"),
        columns=[f"path_{i}" for i in range(result.shape[1])],
    )
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output)
    logger.info("Wrote %s", output)
    typer.echo(str(output))


# ──────────────────────────────────────────────────────────────────────────────
# plotting commands
# ──────────────────────────────────────────────────────────────────────────────
plot_app = typer.Typer(help="Generate plots of simulated paths.")


@plot_app.command("fbm")
def fbm_cmd(
    path: Path = DEFAULT_OUTPUT_DIR / "fbm.png",
    hurst: float = typer.Option(0.7, help="Hurst index in (0, 1)."),
    n: int = typer.Option(1025, help="Number of time points."),
    method: str = typer.Option("fft", help="'cholesky' or 'fft'."),
    seed: int = typer.Option(0, help="RNG seed."),
) -> None:
    """Create an FBM plot and save it to PATH."""
    try:
        out = plotting.plot_fbm(path, H=hurst, n=n, method=method, seed=seed)
    except (ValueError, NumericalError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(out)


app.add_typer(plot_app, name="plot")


# ──────────────────────────────────────────────────────────────────────────────
# module entry‑point
# ──────────────────────────────────────────────────────────────────────────────
def _entry_point() -> None:  # invoked by `python -m fractalsim.cli`
    app()


if __name__ == "__main__":
    _entry_point()
