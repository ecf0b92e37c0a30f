"""Command-line interface for farmyard."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from farmyard.config import Config


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """farmyard — validated farm animal records."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _load_config(ctx: click.Context, path: str | None) -> Config:
    root = Path(path).resolve() if path else None
    try:
        config = Config.load(root) if root else Config.load_from_cwd()
    except ValueError as exc:
        click.echo(f"Invalid config: {exc}", err=True)
        sys.exit(1)

    level = logging.DEBUG if ctx.obj.get("verbose") else config.log_level_number
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return config


# --------------------------------------------------------------------------- #
# init
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--path", default=".", help="Project root directory")
def init(path: str):
    """Write a default .farmyard/config.toml in the project root."""
    config_file, created = Config.write_default(Path(path).resolve())
    if created:
        click.echo(f"Created {config_file}")
    else:
        click.echo(f"Config already exists: {config_file}")


# --------------------------------------------------------------------------- #
# describe
# --------------------------------------------------------------------------- #

# ignore_unknown_options lets a negative WEIGHT reach validation
@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("code")
@click.argument("birth_date")
@click.argument("sex")
@click.argument("weight", type=float)
@click.option("--species", "-s", default=None, help="Species name (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Print the animal as JSON")
@click.option("--path", default=None, help="Project root")
@click.pass_context
def describe(
    ctx: click.Context,
    code: str,
    birth_date: str,
    sex: str,
    weight: float,
    species: str | None,
    as_json: bool,
    path: str | None,
):
    """Validate an animal and show how it behaves."""
    config = _load_config(ctx, path)

    from farmyard.animal import Animal
    from farmyard.models import Err, InvalidField
    from farmyard.species import available_species

    result = Animal.create(
        code,
        birth_date,
        sex,
        weight,
        species or config.default_species,
        notation=config.sex_notation,
    )
    if isinstance(result, Err):
        error = result.error
        message = f"Invalid {error.field.value}: {error.message}"
        if error.field is InvalidField.SPECIES:
            message += f". Available: {', '.join(available_species())}"
        click.echo(message, err=True)
        sys.exit(1)

    animal = result.value
    if as_json:
        data = animal.to_dict(config.sex_notation)
        data.update(
            sound=animal.make_sound(),
            joy=animal.express_joy(),
            anger=animal.express_anger(),
        )
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Code:      {animal.code}")
    click.echo(f"Species:   {animal.species_name()}")
    click.echo(f"Born:      {animal.birth_date.isoformat()}")
    click.echo(f"Sex:       {animal.sex.symbol(config.sex_notation)} ({animal.sex.value})")
    click.echo(f"Weight:    {animal.weight} kg")
    click.echo(f"Sound:     {animal.make_sound()}")
    click.echo(f"Happy:     {animal.express_joy()}")
    click.echo(f"Angry:     {animal.express_anger()}")


# --------------------------------------------------------------------------- #
# species
# --------------------------------------------------------------------------- #

@main.command("species")
def list_species():
    """List the registered species."""
    from farmyard.species import available_species, get_species

    click.echo(f"{'Species':<10}  Sound")
    click.echo("-" * 40)
    for name in available_species():
        click.echo(f"{name:<10}  {get_species(name).make_sound()}")
