"""Command-line interface for logit_irls."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import pandas as pd
import typer

from ..serving import load_model, predict_frame
from ..utils import get_logger, json_log

app = typer.Typer(help='Logistic regression (IRLS) CLI', no_args_is_help=True)

log = get_logger(__name__)


@app.command('train')
def train(
    config: Annotated[
        Path,
        typer.Option(
            '--config',
            '-c',
            exists=True,
            readable=True,
            help='Path to training config YAML.',
        ),
    ] = Path('configs/training.yaml'),
) -> None:
    """Train a model from a config file."""
    # Lazy import keeps --help fast
    from ..models.logreg.training import train_from_config

    log.info(json_log('cli.train.start', component='cli', config=str(config)))
    result = train_from_config(config)
    for name, value in result['report'].items():
        typer.echo(f'{name}: {value}')
    typer.echo(f'Model trained. Artifacts in {result["artifact_dir"]}')


@app.command('predict')
def predict(
    model_dir: Annotated[
        Path,
        typer.Option(
            '--model-dir',
            '-m',
            exists=True,
            file_okay=False,
            help='Directory with logit_irls.joblib and metadata.json.',
        ),
    ],
    input_csv: Annotated[
        Path,
        typer.Option(
            '--input',
            '-i',
            exists=True,
            readable=True,
            help='CSV with the feature columns.',
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            '--output',
            '-o',
            help='Output CSV path (default: <input>.predictions.csv).',
        ),
    ] = None,
) -> None:
    """Score a CSV with a trained model."""
    artifact = load_model(model_dir)
    df = pd.read_csv(input_csv)
    scored = predict_frame(artifact, df)

    target_output = (
        Path(output).expanduser().resolve()
        if output is not None
        else Path(input_csv).with_suffix('.predictions.csv')
    )
    target_output.parent.mkdir(parents=True, exist_ok=True)
    scored.to_csv(target_output, index=False)

    log.info(
        json_log(
            'cli.predict.completed',
            component='cli',
            rows=len(scored),
            output=str(target_output),
        )
    )
    typer.echo(f'Predictions written to: {target_output}')


if __name__ == '__main__':
    app()
