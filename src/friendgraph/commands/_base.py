"""Click building blocks shared by the friendgraph commands.

FgCommand and FgGroup take an ``examples`` string that ``--examples``
prints, which keeps ``--help`` short. PERSON is the parameter type for
arguments naming someone already in the network; it completes names from
the working file picked by the root ``-c`` and ``-f`` flags.
"""

from __future__ import annotations

import logging
from typing import Any

import click
from click.shell_completion import CompletionItem

logger = logging.getLogger(__name__)


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when an ``examples`` text is given."""

    params: list[click.Parameter]

    def _install_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class FgCommand(_ExamplesMixin, click.Command):
    """Command with optional ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class FgGroup(_ExamplesMixin, click.Group):
    """Group with optional ``--examples``; its subcommands are FgCommands."""

    command_class = FgCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


def _known_people(ctx: click.Context) -> list[str]:
    """Names in the working network the root flags point at, or [] if unreadable."""
    from friendgraph.config.settings import FriendGraphSettings
    from friendgraph.infrastructure.network import Network
    from friendgraph.infrastructure.store import GraphStoreError

    root = ctx.find_root().params
    try:
        settings = FriendGraphSettings.from_cli(
            config_path=root.get("config_path"),
            network_file=root.get("network_file"),
        )
        return Network(settings).open().graph.people()
    except (GraphStoreError, click.ClickException) as exc:
        logger.debug("No completions: %s", exc)
        return []


class PersonName(click.ParamType):
    """A person's name; completes from the working network."""

    name = "name"

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        return [
            CompletionItem(person)
            for person in _known_people(ctx)
            if person.startswith(incomplete)
        ]


PERSON = PersonName()
