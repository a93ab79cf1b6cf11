"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from friendgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from friendgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: bare names, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == "list_friendships":
        return "\n".join(" ".join(pair) for pair in result.data.get("pairs", []))

    steps = result.data.get("steps")
    if steps:
        return "\n".join(steps)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["name"]) for item in items if "name" in item)

    if "connected" in result.data:
        return "yes" if result.data["connected"] else "no"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "fg.ok"), (f"  {result.op}", "fg.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fg.key")
    if key in ("name", "first", "second", "source", "target"):
        v = Text(str(value), style="fg.name")
    elif key == "path":
        v = Text(str(value), style="fg.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = Text(f"{prefix}{span.get('name', '?')} ")
    line.append(f"{span.get('duration_ms', 0.0):.2f}ms", style="fg.score")
    for key, value in span.get("annotations", {}).items():
        line.append(f" {key}={value}", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "fg.error"), (f"  {result.op}", "fg.op"), " - ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _name_table(items: list[dict[str, Any]], *, score_key: str | None, score_label: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="fg.name")
    if score_key:
        table.add_column(score_label, style="fg.score", justify="right")
    for item in items:
        row: list[Text | str] = [Text(str(item["name"]))]
        if score_key:
            row.append(str(item.get(score_key, "")))
        table.add_row(*row)
    return table


# ── Mutation renderers ────────────────────────────────────────────────


def _render_add_person(result: ServiceResult, console: Console) -> None:
    added = result.data.get("added", [])
    if not added:
        console.print("No new people added.")
        return
    for name in added:
        console.print(f"Person '[fg.name]{escape(name)}[/fg.name]' added to the network.")


def _render_remove_person(result: ServiceResult, console: Console) -> None:
    d = result.data
    console.print(f"Person '[fg.name]{escape(d['name'])}[/fg.name]' removed from the network.")
    _field(console, "friendships_removed", d.get("friendships_removed", 0))


def _pair(d: dict[str, Any]) -> str:
    return f"'{escape(d['first'])}' and '{escape(d['second'])}'"


def _render_add_friend(result: ServiceResult, console: Console) -> None:
    d = result.data
    if d.get("created"):
        console.print(f"Friendship added between {_pair(d)}.")
    else:
        console.print(f"No friendship added between {_pair(d)}.")


def _render_remove_friend(result: ServiceResult, console: Console) -> None:
    d = result.data
    if d.get("removed"):
        console.print(f"Friendship removed between {_pair(d)}.")
    else:
        console.print(f"No friendship between {_pair(d)}.")


def _render_store(result: ServiceResult, console: Console) -> None:
    """Render load/save results."""
    _status_line(console, result)
    for key in ("path", "people", "friendships"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Query renderers ───────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console) -> None:
    d = result.data
    verdict = "are friends" if d.get("connected") else "are not friends"
    console.print(f"{_pair(d)} {verdict}.")


def _render_people(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No people in the network.")
        return
    console.print(_name_table(items, score_key="friends", score_label="Friends"))


def _render_friendships(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No people in the network.")
        return
    for item in items:
        line = Text(f"{item['name']}:", style="fg.name")
        if item["friends"]:
            line.append(" " + " ".join(item["friends"]))
        console.print(line)
    console.print(f"\n{result.data.get('count', 0)} friendships")


def _render_name_list(result: ServiceResult, console: Console) -> None:
    """Render friends_of and mutual_friends."""
    items = result.data.get("items", [])
    if not items:
        console.print("None.")
        return
    for item in items:
        console.print(f"- {escape(item['name'])}")


def _render_recommend(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    name = result.data.get("name", "")
    if not items:
        console.print(f"No recommendations available for '{escape(name)}'.")
        return
    console.print(f"Recommended friends for '[fg.name]{escape(name)}[/fg.name]':")
    console.print(_name_table(items, score_key="mutual_friends", score_label="Mutual"))


def _render_path(result: ServiceResult, console: Console) -> None:
    """Render shortest path as a chain."""
    steps = result.data.get("steps", [])
    if not steps:
        console.print("No path found.")
        return
    console.print(" -> ".join(f"[fg.name]{escape(s)}[/fg.name]" for s in steps))
    avoid = result.data.get("avoid")
    if avoid:
        console.print(f"Avoiding: {escape(', '.join(avoid))}")
    console.print(f"\nPath length: {result.data.get('length', len(steps) - 1)}")


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add_person": _render_add_person,
    "remove_person": _render_remove_person,
    "add_friend": _render_add_friend,
    "remove_friend": _render_remove_friend,
    "load": _render_store,
    "save": _render_store,
    # Queries
    "check_friends": _render_check,
    "list_people": _render_people,
    "list_friendships": _render_friendships,
    "friends_of": _render_name_list,
    "mutual_friends": _render_name_list,
    "recommend": _render_recommend,
    "path": _render_path,
    "path_avoiding": _render_path,
}
