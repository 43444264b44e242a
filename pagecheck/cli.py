# pagecheck/cli.py
from __future__ import annotations

"""Command-line interface
------------------------
Inspect effective configuration and preview how locators compose.
"""

import json
from pathlib import Path
from typing import Optional

import click

from pagecheck.selectors.locator import ElementLocator
from pagecheck.utils.config import get_settings
from pagecheck.utils.logger import set_log_level


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2, ensure_ascii=False))


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from settings",
)
@click.version_option(package_name="pagecheck")
def cli(log_level: Optional[str]):
    _ = get_settings()
    if log_level:
        set_log_level(log_level.upper())


@cli.command("config")
def cmd_config():
    """Print effective configuration (after .env & env vars)."""
    s = get_settings()
    data = {
        k: (str(v) if isinstance(v, Path) else getattr(v, "value", v))
        for k, v in s.model_dump().items()
    }
    _echo_json(data)


@cli.command("compose")
@click.argument("selector")
@click.option("--parent", "parent_selector", type=str, default=None, help="Ancestor selector to scope the lookup")
def cmd_compose(selector: str, parent_selector: Optional[str]):
    """
    Show the selectors an element will query.

    Examples:
      pagecheck compose "button.save" --parent "div.form"
    """
    loc = ElementLocator.of(selector, parent_selector)
    _echo_json(
        {
            "selector": loc.effective_selector,
            "parent_selector": loc.effective_parent_selector,
        }
    )


if __name__ == "__main__":
    cli()
