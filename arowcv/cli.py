#!filepath: arowcv/cli.py
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.table import Table

from arowcv import __version__, init_logging
from arowcv.config.app_config import AppConfig
from arowcv.utils.errors import UserInputError

app = typer.Typer(help="AROW cross-validation CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
    data: Optional[str] = typer.Option(None, "--data", help="Override data.path"),
    epoch: Optional[int] = typer.Option(None, "--epoch", help="Override training.epoch"),
    fold: Optional[int] = typer.Option(None, "--fold", help="Override cross_validation.fold"),
    hyper_parameter: Optional[float] = typer.Option(
        None, "--hyper-parameter", "-r", help="Override training.hyper_parameter"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Override cross_validation.seed"),
):
    """
    Run k-fold cross-validation of AROW on a delimited-text dataset
    """
    from arowcv.workflows.cross_validation import run_cross_validation

    overrides = {
        "data": {"path": data},
        "training": {"epoch": epoch, "hyper_parameter": hyper_parameter},
        "cross_validation": {"fold": fold, "seed": seed},
    }

    try:
        cfg = AppConfig.load(config)

        for section, values in overrides.items():
            values = {k: v for k, v in values.items() if v is not None}
            if values:
                current = getattr(cfg, section)
                setattr(cfg, section, current.model_validate({**current.model_dump(), **values}))

        init_logging(cfg.log)
        result = run_cross_validation(cfg)
    except (UserInputError, FileNotFoundError, ValidationError) as e:
        # user-facing: message only, no traceback
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"AROW cross-validation ({result.run_id})")
    for column in ["fold", "train", "test", "misclassified", "error"]:
        table.add_column(column, justify="right")
    for r in result.folds:
        table.add_row(
            str(r.fold_index),
            str(r.train_size),
            str(r.test_size),
            str(r.misclassified),
            f"{r.error:.4f}",
        )
    print(table)

    print(f"[green]the error of the algorithm : {result.average_error:.6f}[/green]")


if __name__ == "__main__":
    app()

# python -m arowcv.cli run --config arowcv/config/base.yml --data data/iris-twoclass.csv
