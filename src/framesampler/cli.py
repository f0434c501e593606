"""CLI entry point for framesampler.

Usage:
    framesampler extract video.mp4 out/ -n 50 --direction reverse
    framesampler run                          # Run pipeline from configs/pipeline.yaml
    framesampler run-step extract_frames -i '{"video_path": "video.mp4"}'
    framesampler info                         # Show pipeline info
    framesampler schema s01_extract_frames    # Show step JSON schemas
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from framesampler.core.errors import FrameSamplerError
from framesampler.core.logging import setup_logging

app = typer.Typer(name="framesampler", help="Evenly-spaced video frame extraction")
console = Console()

DEFAULT_CONFIG = Path("configs/pipeline.yaml")


def _print_output(output) -> None:
    console.print(f"[green]Done. Output:[/green] {output.model_dump_json(indent=2)}")


@app.command()
def extract(
    video: Path = typer.Argument(..., help="Input video file"),
    output_dir: Path = typer.Argument(..., help="Output folder (emptied before writing)"),
    frames: int = typer.Option(100, "--frames", "-n", min=1, help="Number of frames to extract"),
    direction: str = typer.Option("forward", "--direction", "-d", help="forward or reverse"),
    output_format: str = typer.Option("png", "--format", "-f", help="png, jpg or bmp"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Extract evenly-spaced frames from a single video."""
    setup_logging(log_level)
    from pydantic import ValidationError

    from framesampler.steps.s01_extract_frames.step import extract_frames

    try:
        output = extract_frames(
            frames, direction.lower(), video, output_dir, output_format=output_format.lower()
        )
    except (FrameSamplerError, ValidationError, OSError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Extracted {output.frame_count} frames to {output.frames_dir}[/green]")


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Run the full pipeline."""
    setup_logging(log_level)
    from framesampler.core.pipeline_runner import run_pipeline

    try:
        run_pipeline(config)
    except (FrameSamplerError, OSError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


@app.command()
def run_step(
    step_name: str = typer.Argument(..., help="Step name from pipeline.yaml (e.g. extract_frames)"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    input_json: str = typer.Option(None, "--input", "-i", help="Input as JSON string"),
) -> None:
    """Run a single pipeline step."""
    setup_logging()
    from framesampler.core.pipeline_runner import (
        import_step_class,
        load_pipeline_config,
        load_step_config,
        resolve_config_file,
    )

    try:
        pipeline_cfg = load_pipeline_config(config)
    except OSError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    entry = next((s for s in pipeline_cfg.steps if s.name == step_name), None)
    if entry is None:
        console.print(f"[red]Step '{step_name}' not found in pipeline config[/red]")
        raise typer.Exit(1)

    step_cls = import_step_class(entry.module)
    try:
        step_config = load_step_config(
            resolve_config_file(entry, config.parent), step_cls.config_type
        )
    except OSError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    step_instance = step_cls(config=step_config, data_root=pipeline_cfg.data_root)

    input_data = dict(entry.inputs)
    if input_json:
        input_data.update(json.loads(input_json))

    required = step_cls.input_type.model_json_schema().get("required", [])
    missing = [field for field in required if field not in input_data]
    if missing:
        console.print(f"[yellow]Step '{step_name}' requires input fields: {missing}[/yellow]")
        console.print("[yellow]Use --input/-i with JSON string, e.g.:[/yellow]")
        console.print(f'  framesampler run-step {step_name} -i \'{{"field": "value"}}\'')
        raise typer.Exit(1)

    console.print(f"[green]Running step: {step_name}[/green]")
    try:
        output = step_instance.execute(step_cls.input_type(**input_data))
    except (FrameSamplerError, OSError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    _print_output(output)


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path")) -> None:
    """Show pipeline steps and their status."""
    from framesampler.core.pipeline_runner import load_pipeline_config

    pipeline_cfg = load_pipeline_config(config)
    table = Table(title=f"Pipeline: {pipeline_cfg.project_name}")
    table.add_column("#", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Module", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("Depends On", style="dim")

    for i, step in enumerate(pipeline_cfg.steps, 1):
        table.add_row(
            str(i),
            step.name,
            step.module,
            "Y" if step.enabled else "N",
            ", ".join(step.depends_on) if step.depends_on else "-",
        )
    console.print(table)


@app.command()
def schema(
    step_name: str = typer.Argument("s01_extract_frames", help="Step package name"),
) -> None:
    """Print the input, output and config JSON schemas of a step."""
    from framesampler.core.pipeline_runner import import_step_class

    try:
        step_cls = import_step_class(f"framesampler.steps.{step_name}")
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print_json(
        json.dumps(
            {
                "input": step_cls.get_input_schema(),
                "output": step_cls.get_output_schema(),
                "config": step_cls.get_config_schema(),
            }
        )
    )


if __name__ == "__main__":
    app()
