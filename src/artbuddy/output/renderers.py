"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from artbuddy.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from artbuddy.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    # For list results, return identities only
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_label(item) for item in items if _extract_label(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_label(item: Any) -> str:
    """Extract the identity label of a customer, commission, or iteration dict."""
    if not isinstance(item, dict):
        return ""
    if "name" in item:
        return str(item["name"])
    if "title" in item:
        return str(item["title"])
    if "date" in item:
        return f"{item['date']} {item.get('description', '')}".rstrip()
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ab.ok")
    op = Text(f"  {result.op}", style="ab.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ab.key")
    if key in ("name", "customer"):
        v = Text(str(value), style="ab.name")
    elif key == "title":
        v = Text(str(value), style="ab.title")
    elif key == "fee":
        v = Text(_money(value), style="ab.fee")
    elif key == "completed":
        v = _status_text(bool(value))
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _money(value: Any) -> str:
    return f"{float(value):.2f}" if isinstance(value, (int, float)) else str(value)


def _status_text(completed: bool) -> Text:
    return Text("Completed" if completed else "In progress", style=style_for_status(completed))


def _fields(console: Console, data: dict[str, Any], keys: tuple[str, ...]) -> None:
    for key in keys:
        value = data.get(key)
        if value is None or value == []:
            continue
        _field(console, key, value)


def _customer_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="ab.name")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Tags")
    table.add_column("Commissions", justify="right")
    if verbose:
        table.add_column("Address", style="dim")

    for index, item in enumerate(items, start=1):
        row = [
            str(index),
            str(item.get("name", "")),
            str(item.get("phone", "")),
            str(item.get("email", "")),
            ", ".join(item.get("tags", [])),
            str(item.get("commission_count", 0)),
        ]
        if verbose:
            row.append(str(item.get("address") or ""))
        table.add_row(*row)
    return table


def _commission_table(
    items: list[dict[str, Any]],
    *,
    show_customer: bool = True,
    verbose: bool = False,
) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="ab.title")
    if show_customer:
        table.add_column("Customer", style="ab.name")
    table.add_column("Fee", style="ab.fee", justify="right")
    table.add_column("Deadline")
    table.add_column("Status")
    table.add_column("Iterations", justify="right")
    if verbose:
        table.add_column("Tags", style="dim")

    for index, item in enumerate(items, start=1):
        row: list[Any] = [str(index), str(item.get("title", ""))]
        if show_customer:
            row.append(str(item.get("customer") or ""))
        row.extend(
            [
                _money(item.get("fee", "")),
                str(item.get("deadline", "")),
                _status_text(bool(item.get("completed"))),
                str(item.get("iteration_count", 0)),
            ]
        )
        if verbose:
            row.append(", ".join(item.get("tags", [])))
        table.add_row(*row)
    return table


def _iteration_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", no_wrap=True)
    table.add_column("Description", style="ab.title")
    table.add_column("Feedback")
    if verbose:
        table.add_column("Image", style="dim")

    for item in items:
        row = [
            str(item.get("date", "")),
            str(item.get("description", "")),
            str(item.get("feedback", "")),
        ]
        if verbose:
            row.append(str(item.get("image_path", "")))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ab.error")
    op = Text(f"  {result.op}", style="ab.op")
    sep = Text(" - ")
    console.print(label, op, sep, msg)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Customer renderers ────────────────────────────────────────────────


_CUSTOMER_KEYS = ("name", "phone", "email", "address", "tags")
_COMMISSION_KEYS = ("title", "customer", "fee", "deadline", "completed", "description", "tags")
_ITERATION_KEYS = ("commission", "date", "description", "image_path", "feedback")


def _render_customer_mutation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _fields(console, result.data, _CUSTOMER_KEYS)
    if verbose:
        _field(console, "commission_count", result.data.get("commission_count", 0))


def _render_customer_panel(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render open_customer as a contact panel followed by the commission table."""
    d = result.data
    lines = [f"phone: {d.get('phone', '')}", f"email: {d.get('email', '')}"]
    if d.get("address"):
        lines.append(f"address: {d['address']}")
    if d.get("tags"):
        lines.append(f"tags: {', '.join(d['tags'])}")
    console.print(Panel(Text("\n".join(lines)), title=str(d.get("name", "?")), expand=False))

    commissions = d.get("commissions", [])
    if commissions:
        console.print(_commission_table(commissions, show_customer=False, verbose=verbose))
    console.print(f"\n{len(commissions)} commissions")


def _render_customer_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    console.print(_customer_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} customers")


# ── Commission renderers ──────────────────────────────────────────────


def _render_commission_mutation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _fields(console, result.data, _COMMISSION_KEYS)
    if verbose:
        _field(console, "iteration_count", result.data.get("iteration_count", 0))


def _render_commission_panel(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render open_commission as a summary panel followed by its iterations."""
    d = result.data
    completed = bool(d.get("completed"))
    lines = [
        f"customer: {d.get('customer') or ''}",
        f"fee: {_money(d.get('fee', ''))}",
        f"deadline: {d.get('deadline', '')}",
        f"status: {'Completed' if completed else 'In progress'}",
    ]
    if d.get("tags"):
        lines.append(f"tags: {', '.join(d['tags'])}")
    content = "\n".join(lines)
    if d.get("description"):
        content += f"\n\n{d['description']}"
    console.print(
        Panel(
            Text(content),
            title=str(d.get("title", "?")),
            border_style=style_for_status(completed),
            expand=False,
        )
    )

    iterations = d.get("iterations", [])
    if iterations:
        console.print(_iteration_table(iterations, verbose=verbose))
    console.print(f"\n{len(iterations)} iterations")


def _render_commission_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    console.print(_commission_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} commissions")


# ── Iteration renderers ───────────────────────────────────────────────


def _render_iteration_mutation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _fields(console, result.data, _ITERATION_KEYS)


def _render_iteration_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    console.print(_iteration_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} iterations")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Customers
    "add_customer": _render_customer_mutation,
    "edit_customer": _render_customer_mutation,
    "delete_customer": _render_customer_mutation,
    "open_customer": _render_customer_panel,
    "list_customers": _render_customer_table,
    # Commissions
    "add_commission": _render_commission_mutation,
    "edit_commission": _render_commission_mutation,
    "delete_commission": _render_commission_mutation,
    "open_commission": _render_commission_panel,
    "list_commissions": _render_commission_table,
    # Iterations
    "add_iteration": _render_iteration_mutation,
    "delete_iteration": _render_iteration_mutation,
    "list_iterations": _render_iteration_table,
}
